from hallyu_api.query.pagination import paginate, resolveLimit, resolvePage
import pytest


@pytest.fixture
def records():
	return [{"Id": index} for index in range(1, 46)]


def test_first_page(records):
	result = paginate(records, 1, 20)
	assert len(result.data) == 20
	assert result.data[0]["Id"] == 1
	assert result.pagination.totalPages == 3
	assert result.pagination.totalItems == 45
	assert result.pagination.itemsPerPage == 20
	assert result.pagination.hasNextPage
	assert not result.pagination.hasPrevPage


def test_last_page(records):
	result = paginate(records, 3, 20)
	assert [r["Id"] for r in result.data] == [41, 42, 43, 44, 45]
	assert not result.pagination.hasNextPage
	assert result.pagination.hasPrevPage


@pytest.mark.parametrize("page", [4, 10, 1000])
def test_page_past_the_end_is_empty(records, page):
	result = paginate(records, page, 20)
	assert result.data == []
	assert result.pagination.currentPage == page
	assert result.pagination.totalItems == 45
	assert result.pagination.totalPages == 3
	assert not result.pagination.hasNextPage


def test_empty_collection():
	result = paginate([], 1, 20)
	assert result.data == []
	assert result.pagination.totalPages == 0
	assert not result.pagination.hasNextPage
	assert not result.pagination.hasPrevPage


@pytest.mark.parametrize("value,expected", [
	(None, 1), ("abc", 1), (0, 1), (-3, 1), ("2", 2), (5, 5), (True, 1),
])
def test_resolve_page(value, expected):
	assert resolvePage(value) == expected


@pytest.mark.parametrize("value,expected", [
	(None, 20), ("x", 20), (0, 20), ("50", 50), (100, 100), (250, 100),
])
def test_resolve_limit(value, expected):
	assert resolveLimit(value) == expected


def test_paginate_defaults_invalid_arguments(records):
	result = paginate(records, "first", "many")
	assert result.pagination.currentPage == 1
	assert result.pagination.itemsPerPage == 20
	assert len(result.data) == 20


def test_limit_is_capped(records):
	result = paginate(records * 3, 1, 500)
	assert result.pagination.itemsPerPage == 100
	assert len(result.data) == 100
