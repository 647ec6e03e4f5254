import datetime
from typing import Optional

from hallyu_api.crud.resource import HallyuResourceRequest
from hallyu_api.models.query import SortKeyEnum
from hallyu_api.models.search import RecordKindEnum
from hallyu_api.query.dates import calculateAge


class HallyuActorRequest(HallyuResourceRequest):
	kind = RecordKindEnum.ACTOR
	label = "Actor"
	searchFields = ("StageName", "FullName", "KoreanName")
	sortFields = {
		SortKeyEnum.NAME: "StageName",
		SortKeyEnum.ALPHABETICAL: "FullName",
		SortKeyEnum.DEBUT: "DateOfBirth",
		SortKeyEnum.RECENT: "DateOfBirth",
	}
	defaultSortField = "StageName"

	def annotate(self, record: dict, today: Optional[datetime.date] = None) -> dict:
		return {
			**record,
			"age": calculateAge(record.get("DateOfBirth"), today)
		}
