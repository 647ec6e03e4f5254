import datetime
from typing import Optional

from hallyu_api.crud.hallyu_response import HallyuResponse
from hallyu_api.crud.resource import HallyuResourceRequest, yearPredicate
from hallyu_api.models.query import QueryOptions, SortKeyEnum
from hallyu_api.models.search import RecordKindEnum
from hallyu_api.query.dates import calculateAge, occurringOn, upcomingWithinWindow
from hallyu_api.query.pagination import paginate
from hallyu_api.query.sorting import sortItems


class HallyuGroupRequest(HallyuResourceRequest):
	kind = RecordKindEnum.GROUP
	label = "Group"
	searchFields = ("Name", "ShortName", "KoreanName")
	sortFields = {
		SortKeyEnum.NAME: "Name",
		SortKeyEnum.ALPHABETICAL: "Name",
		SortKeyEnum.DEBUT: "Debut",
		SortKeyEnum.RECENT: "Debut",
		SortKeyEnum.POPULARITY: "CurrentMemberCount",
	}
	defaultSortField = "Name"

	def annotate(self, record: dict, today: Optional[datetime.date] = None) -> dict:
		return {
			**record,
			"yearsActive": calculateAge(record.get("Debut"), today)
		}

	def listGroups(
		self,
		queryOptions: QueryOptions,
		debutYear: Optional[int] = None
	) -> HallyuResponse:
		return self.listRecords(
			queryOptions,
			predicates=[yearPredicate("Debut", debutYear)]
		)

	def describe(self, record: dict) -> dict:
		name = record.get("Name")
		members = []
		if isinstance(name, str) and name:
			members = [
				artist for artist in self.data.artists
				if isinstance(artist.get("Group"), str) and artist["Group"].lower() == name.lower()
			]

		return {
			**self.annotate(record),
			"Members": members
		}

	def getTodaysAnniversaries(self, today: Optional[datetime.date] = None) -> HallyuResponse:
		anniversaries = [
			self.annotate(group, today)
			for group in occurringOn(self.getRecords(), "Debut", today)
		]

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=anniversaries,
			meta={"count": len(anniversaries)}
		)

	def getUpcomingAnniversaries(
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
			"Debut",
			days,
			today=today,
			daysKey="daysUntilAnniversary"
		)
		upcoming = sortItems(upcoming, "daysUntilAnniversary")
		upcoming = [self.annotate(group, today) for group in upcoming]

		queryOptions = self.buildQueryOptions(page=page, limit=limit)
		result = paginate(upcoming, queryOptions.page, queryOptions.limit, maxLimit=self.config.maxPageLimit)

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=result,
			meta={"daysAhead": days, "totalUpcoming": len(upcoming)}
		)
