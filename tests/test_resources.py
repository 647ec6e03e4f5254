import datetime
import pytest

from hallyu_api.crud.actor import HallyuActorRequest
from hallyu_api.crud.artist import HallyuArtistRequest, normalizeGender
from hallyu_api.crud.company import HallyuCompanyRequest
from hallyu_api.crud.group import HallyuGroupRequest
from hallyu_api.models.query import SortKeyEnum, SortOrderEnum


@pytest.fixture
def artistRequest(test_config, data_context):
	return HallyuArtistRequest(test_config, data_context)


@pytest.fixture
def groupRequest(test_config, data_context):
	return HallyuGroupRequest(test_config, data_context)


@pytest.fixture
def companyRequest(test_config, data_context):
	return HallyuCompanyRequest(test_config, data_context)


def stageNames(response):
	return [record["StageName"] for record in response.model.data]


def groupNames(response):
	return [record["Name"] for record in response.model.data]


class TestArtistRequest:

	def test_default_listing(self, artistRequest):
		response = artistRequest.listArtists(artistRequest.buildQueryOptions())
		assert response.success
		assert stageNames(response) == ["IU", "Jennie", "Jimin", "Jungkook", "Lisa", "Taeyeon"]
		assert response.model.pagination.totalItems == 6
		assert response.meta["totalResults"] == 6
		assert all("age" in record for record in response.model.data)

	def test_gender_filter(self, artistRequest):
		queryOptions = artistRequest.buildQueryOptions(filters={"Gender": normalizeGender("female")})
		response = artistRequest.listArtists(queryOptions)
		assert stageNames(response) == ["IU", "Jennie", "Lisa", "Taeyeon"]

	def test_company_filter_desc(self, artistRequest):
		queryOptions = artistRequest.buildQueryOptions(
			sortOrder=SortOrderEnum.DESC,
			filters={"Company": "yg"}
		)
		assert stageNames(artistRequest.listArtists(queryOptions)) == ["Lisa", "Jennie"]

	def test_birth_year(self, artistRequest):
		queryOptions = artistRequest.buildQueryOptions()
		response = artistRequest.listArtists(queryOptions, birthYear=1997)
		assert stageNames(response) == ["Jungkook", "Lisa"]

	def test_recent_sorts_newest_first(self, artistRequest):
		queryOptions = artistRequest.buildQueryOptions(sortKey=SortKeyEnum.RECENT)
		assert queryOptions.sortField == "DateOfBirth"
		assert queryOptions.sortOrder == SortOrderEnum.DESC
		assert stageNames(artistRequest.listArtists(queryOptions))[:2] == ["Jungkook", "Lisa"]

	def test_search_in_listing(self, artistRequest):
		queryOptions = artistRequest.buildQueryOptions(searchQuery="kim")
		assert stageNames(artistRequest.listArtists(queryOptions)) == ["Jennie", "Taeyeon"]

	def test_pagination_options(self, artistRequest):
		queryOptions = artistRequest.buildQueryOptions(page="2", limit="4")
		response = artistRequest.listArtists(queryOptions)
		assert stageNames(response) == ["Lisa", "Taeyeon"]
		assert response.model.pagination.totalPages == 2
		assert response.model.pagination.hasPrevPage

	def test_invalid_pagination_falls_back(self, artistRequest):
		queryOptions = artistRequest.buildQueryOptions(page="zero", limit="-5")
		assert queryOptions.page == 1
		assert queryOptions.limit == 20

	def test_get_record(self, artistRequest):
		response = artistRequest.getRecord(3)
		assert response.success
		assert response.model["StageName"] == "Lisa"
		assert [member["StageName"] for member in response.model["groupMembers"]] == ["Lisa", "Jennie"]
		assert [member["StageName"] for member in response.model["relatedIdols"]] == ["Jennie"]

	def test_get_missing_record(self, artistRequest):
		response = artistRequest.getRecord(404)
		assert not response.success
		assert response.statusCode == 404
		assert response.error["message"] == "Artist not found"

	def test_search_records(self, artistRequest):
		response = artistRequest.searchRecords("kim")
		assert stageNames(response) == ["Jennie", "Taeyeon"]
		assert [record["relevanceScore"] for record in response.model.data] == [28, 28]
		assert response.meta == {"searchQuery": "kim", "totalResults": 2}

	def test_search_requires_query(self, artistRequest):
		response = artistRequest.searchRecords("   ")
		assert response.statusCode == 400

	def test_todays_birthdays(self, artistRequest):
		response = artistRequest.getTodaysBirthdays(today=datetime.date(2026, 9, 1))
		assert [artist["StageName"] for artist in response.model] == ["Jungkook"]
		assert response.model[0]["age"] == 29
		assert response.meta == {"count": 1}

	def test_upcoming_birthdays(self, artistRequest):
		response = artistRequest.getUpcomingBirthdays(days=30, today=datetime.date(2026, 3, 1))
		assert stageNames(response) == ["Taeyeon", "Lisa"]
		assert [artist["daysUntilBirthday"] for artist in response.model.data] == [8, 26]
		assert response.meta == {"daysAhead": 30, "totalUpcoming": 2}

	def test_upcoming_birthdays_default_window(self, artistRequest):
		response = artistRequest.getUpcomingBirthdays(today=datetime.date(2026, 10, 1))
		assert stageNames(response) == ["Jimin"]
		assert response.meta["daysAhead"] == 30


class TestGroupRequest:

	def test_active_filter_treats_missing_as_inactive(self, groupRequest):
		queryOptions = groupRequest.buildQueryOptions(filters={"Active": False})
		assert groupNames(groupRequest.listGroups(queryOptions)) == ["NCT", "Wonder Girls"]

	def test_member_count_filter(self, groupRequest):
		queryOptions = groupRequest.buildQueryOptions(filters={"CurrentMemberCount": 7})
		assert groupNames(groupRequest.listGroups(queryOptions)) == ["BTS"]

	def test_popularity_sort(self, groupRequest):
		queryOptions = groupRequest.buildQueryOptions(
			sortKey=SortKeyEnum.POPULARITY,
			sortOrder=SortOrderEnum.DESC
		)
		assert groupNames(groupRequest.listGroups(queryOptions)) == [
			"NCT", "Girls' Generation", "BTS", "Wonder Girls", "BLACKPINK"
		]

	def test_debut_year(self, groupRequest):
		response = groupRequest.listGroups(groupRequest.buildQueryOptions(), debutYear=2016)
		assert groupNames(response) == ["BLACKPINK", "NCT"]

	def test_short_name_search(self, groupRequest):
		response = groupRequest.searchRecords("snsd")
		assert groupNames(response) == ["Girls' Generation"]
		assert response.model.data[0]["relevanceScore"] == 20

	def test_describe_includes_members(self, groupRequest):
		response = groupRequest.getRecord(1)
		assert [member["StageName"] for member in response.model["Members"]] == ["Jungkook", "Jimin"]

	def test_upcoming_anniversaries(self, groupRequest):
		response = groupRequest.getUpcomingAnniversaries(days=10, today=datetime.date(2026, 8, 1))
		assert groupNames(response) == ["Girls' Generation", "BLACKPINK"]
		assert [group["daysUntilAnniversary"] for group in response.model.data] == [4, 7]

	def test_todays_anniversaries(self, groupRequest):
		response = groupRequest.getTodaysAnniversaries(today=datetime.date(2026, 6, 13))
		assert [group["Name"] for group in response.model] == ["BTS"]
		assert response.model[0]["yearsActive"] == 13


class TestCompanyRequest:

	def test_listing_strips_rosters(self, companyRequest):
		response = companyRequest.listRecords(companyRequest.buildQueryOptions())
		assert groupNames(response) == [
			"EDAM Entertainment",
			"HYBE",
			"JYP Entertainment",
			"SM Entertainment",
			"YG Entertainment",
		]
		assert all("Artists" not in company for company in response.model.data)

	def test_type_filter(self, companyRequest):
		queryOptions = companyRequest.buildQueryOptions(filters={"Type": "independent"})
		assert groupNames(companyRequest.listRecords(queryOptions)) == ["EDAM Entertainment"]

	def test_detail_embeds_rosters(self, companyRequest):
		response = companyRequest.getRecord(2)
		assert response.model["Name"] == "YG Entertainment"
		assert [artist["StageName"] for artist in response.model["Artists"]] == ["Lisa", "Jennie"]
		assert [group["Name"] for group in response.model["Groups"]] == ["BLACKPINK"]

	def test_missing_company(self, companyRequest):
		response = companyRequest.getRecord(42)
		assert response.statusCode == 404
		assert response.error["message"] == "Company not found"


def test_actor_listing(test_config, data_context):
	actorRequest = HallyuActorRequest(test_config, data_context)
	response = actorRequest.listRecords(actorRequest.buildQueryOptions(sortKey=SortKeyEnum.ALPHABETICAL))
	assert stageNames(response) == ["Kim Go-eun", "Song Kang"]
	assert actorRequest.searchRecords("song").model.data[0]["StageName"] == "Song Kang"


def test_actor_age_pinned_to_date(test_config, data_context):
	actorRequest = HallyuActorRequest(test_config, data_context)
	songKang = data_context.findById("actor", 1)
	assert actorRequest.annotate(songKang, datetime.date(2026, 4, 22))["age"] == 31
	assert actorRequest.annotate(songKang, datetime.date(2026, 4, 23))["age"] == 32
