from hallyu_api.crud.resource import HallyuResourceRequest
from hallyu_api.models.query import SortKeyEnum
from hallyu_api.models.search import RecordKindEnum


class HallyuCompanyRequest(HallyuResourceRequest):
	kind = RecordKindEnum.COMPANY
	label = "Company"
	searchFields = ("Name",)
	sortFields = {
		SortKeyEnum.NAME: "Name",
		SortKeyEnum.ALPHABETICAL: "Name",
		SortKeyEnum.DEBUT: "Founded",
		SortKeyEnum.RECENT: "Founded",
		SortKeyEnum.POPULARITY: "ArtistCount",
	}
	defaultSortField = "Name"

	def annotate(self, record: dict) -> dict:
		# list views carry counts only, the detail view embeds the rosters
		return {
			key: value for key, value in record.items()
			if key not in ("Artists", "Groups")
		}

	def describe(self, record: dict) -> dict:
		return record
