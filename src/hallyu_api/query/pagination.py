import math
from typing import Any, Sequence

from hallyu_api.models.pagination import PageMeta, PaginatedResult


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def _toInt(value: Any):
	if isinstance(value, bool):
		return None
	try:
		return int(str(value).strip())
	except (TypeError, ValueError):
		return None


def resolvePage(page: Any) -> int:
	resolved = _toInt(page)
	if resolved is None or resolved < 1:
		return DEFAULT_PAGE
	return resolved


def resolveLimit(limit: Any, default: int = DEFAULT_LIMIT, maximum: int = MAX_LIMIT) -> int:
	resolved = _toInt(limit)
	if resolved is None or resolved < 1:
		return default
	return min(resolved, maximum)


def paginate(
	items: Sequence[dict],
	page: Any = DEFAULT_PAGE,
	limit: Any = DEFAULT_LIMIT,
	maxLimit: int = MAX_LIMIT
) -> PaginatedResult:
	""" Slice items into the requested page.

	Invalid page and limit values fall back to their defaults. Pages past
	the end come back empty with metadata describing the full collection.
	"""
	page = resolvePage(page)
	limit = resolveLimit(limit, maximum=maxLimit)

	items = list(items)
	totalItems = len(items)
	totalPages = math.ceil(totalItems / limit)

	start = (page - 1) * limit
	end = start + limit

	return PaginatedResult(
		data=items[start:end],
		pagination=PageMeta(
			currentPage=page,
			totalPages=totalPages,
			totalItems=totalItems,
			itemsPerPage=limit,
			hasNextPage=page < totalPages,
			hasPrevPage=page > 1
		)
	)
