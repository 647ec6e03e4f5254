import datetime
from typing import Optional

from hallyu_api.crud.hallyu_response import HallyuResponse
from hallyu_api.crud.resource import HallyuResourceRequest, yearPredicate
from hallyu_api.models.query import QueryOptions, SortKeyEnum
from hallyu_api.models.search import RecordKindEnum
from hallyu_api.query.dates import calculateAge, occurringOn, upcomingWithinWindow
from hallyu_api.query.pagination import paginate
from hallyu_api.query.sorting import sortItems


GENDER_CODES = {
	"m": "M",
	"male": "M",
	"f": "F",
	"female": "F",
}


def normalizeGender(gender: Optional[str]) -> Optional[str]:
	if gender is None:
		return None
	return GENDER_CODES.get(gender.strip().lower())


class HallyuArtistRequest(HallyuResourceRequest):
	kind = RecordKindEnum.ARTIST
	label = "Artist"
	searchFields = ("StageName", "FullName", "KoreanName", "KoreanStageName", "Group")
	sortFields = {
		SortKeyEnum.NAME: "StageName",
		SortKeyEnum.ALPHABETICAL: "StageName",
		SortKeyEnum.DEBUT: "DateOfBirth",
		SortKeyEnum.RECENT: "DateOfBirth",
	}
	defaultSortField = "StageName"

	def annotate(self, record: dict, today: Optional[datetime.date] = None) -> dict:
		return {
			**record,
			"age": calculateAge(record.get("DateOfBirth"), today)
		}

	def listArtists(
		self,
		queryOptions: QueryOptions,
		birthYear: Optional[int] = None
	) -> HallyuResponse:
		return self.listRecords(
			queryOptions,
			predicates=[yearPredicate("DateOfBirth", birthYear)]
		)

	def getArtistsByGroup(self, groupName: Optional[str]):
		if not groupName:
			return []
		groupName = groupName.lower()
		return [
			artist for artist in self.getRecords()
			if isinstance(artist.get("Group"), str) and artist["Group"].lower() == groupName
		]

	def describe(self, record: dict) -> dict:
		groupMembers = self.getArtistsByGroup(record.get("Group"))
		return {
			**self.annotate(record),
			"groupMembers": groupMembers,
			"relatedIdols": [
				member for member in groupMembers
				if member.get("Id") != record.get("Id")
			]
		}

	def getTodaysBirthdays(self, today: Optional[datetime.date] = None) -> HallyuResponse:
		birthdays = [
			self.annotate(artist, today)
			for artist in occurringOn(self.getRecords(), "DateOfBirth", today)
		]

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=birthdays,
			meta={"count": len(birthdays)}
		)

	def getUpcomingBirthdays(
		self,
		days: Optional[int] = None,
		page=None,
		limit=None,
		today: Optional[datetime.date] = None
	) -> HallyuResponse:
		if days is None:
			days = self.config.upcomingDays

		upcoming = upcomingWithinWindow(
			self.getRecords(),
			"DateOfBirth",
			days,
			today=today,
			daysKey="daysUntilBirthday"
		)
		upcoming = sortItems(upcoming, "daysUntilBirthday")
		upcoming = [self.annotate(artist, today) for artist in upcoming]

		queryOptions = self.buildQueryOptions(page=page, limit=limit)
		result = paginate(upcoming, queryOptions.page, queryOptions.limit, maxLimit=self.config.maxPageLimit)

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=result,
			meta={"daysAhead": days, "totalUpcoming": len(upcoming)}
		)
