from typing import Callable, Dict, List, Optional, Sequence

from hallyu_api.core.logging import crudLogger
from hallyu_api.crud.hallyu_request import HallyuRequest
from hallyu_api.crud.hallyu_response import HallyuResponse
from hallyu_api.models.query import QueryOptions, SortKeyEnum, SortOrderEnum
from hallyu_api.models.search import RecordKindEnum
from hallyu_api.query.dates import parseIsoDate
from hallyu_api.query.filtering import filterItems
from hallyu_api.query.pagination import paginate, resolveLimit, resolvePage
from hallyu_api.query.relevance import rankRecords
from hallyu_api.query.search import searchItems
from hallyu_api.query.sorting import sortItems


def yearPredicate(field: str, year: Optional[int]) -> Optional[Callable[[dict], bool]]:
	if year is None:
		return None

	def predicate(record: dict) -> bool:
		date = parseIsoDate(record.get(field))
		return date is not None and date.year == year

	return predicate


class HallyuResourceRequest(HallyuRequest):
	""" Shared list / lookup / search behaviour for one record kind.

	Subclasses name the kind, the ordered search fields (highest priority
	first), the sort field behind each sort key and the public label used
	in error messages.
	"""
	kind: RecordKindEnum
	label: str = "Record"
	searchFields: Sequence[str] = ("Name",)
	sortFields: Dict[SortKeyEnum, str] = {}
	defaultSortField: str = "Name"

	def resolveSortField(self, sortKey: Optional[SortKeyEnum]) -> str:
		if sortKey is None:
			return self.defaultSortField
		return self.sortFields.get(SortKeyEnum(sortKey), self.defaultSortField)

	def buildQueryOptions(
		self,
		page=None,
		limit=None,
		sortKey: Optional[SortKeyEnum] = None,
		sortOrder: Optional[SortOrderEnum] = None,
		filters: Optional[dict] = None,
		searchQuery: Optional[str] = None
	) -> QueryOptions:
		if sortOrder is None:
			# most recent first unless asked otherwise
			sortOrder = SortOrderEnum.DESC if sortKey == SortKeyEnum.RECENT else SortOrderEnum.ASC

		return QueryOptions(
			page=resolvePage(page),
			limit=resolveLimit(limit, default=self.config.defaultPageLimit, maximum=self.config.maxPageLimit),
			sortField=self.resolveSortField(sortKey),
			sortOrder=sortOrder,
			filters={key: value for key, value in (filters or {}).items() if value is not None},
			searchQuery=searchQuery
		)

	def annotate(self, record: dict) -> dict:
		return record

	def getRecords(self):
		return self.data.getCollection(self.kind)

	def queryRecords(
		self,
		queryOptions: QueryOptions,
		predicates: Sequence[Optional[Callable[[dict], bool]]] = ()
	) -> List[dict]:
		records = filterItems(self.getRecords(), queryOptions.filters)

		for predicate in predicates:
			if predicate is not None:
				records = [record for record in records if predicate(record)]

		if queryOptions.searchQuery:
			records = searchItems(
				records,
				queryOptions.searchQuery,
				self.searchFields,
				threshold=self.config.fuzzyThreshold
			)

		return sortItems(records, queryOptions.sortField, queryOptions.sortOrder.value)

	def listRecords(
		self,
		queryOptions: QueryOptions,
		predicates: Sequence[Optional[Callable[[dict], bool]]] = ()
	) -> HallyuResponse:
		records = self.queryRecords(queryOptions, predicates)

		result = paginate(
			records,
			queryOptions.page,
			queryOptions.limit,
			maxLimit=self.config.maxPageLimit
		)
		result.data = [self.annotate(record) for record in result.data]

		crudLogger.info(
			f"list {self.kind.value}: filters={queryOptions.filters} search={queryOptions.searchQuery!r} total={result.pagination.totalItems}"
		)

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=result,
			meta={"totalResults": result.pagination.totalItems}
		)

	def getRecord(self, recordId) -> HallyuResponse:
		record = self.data.findById(self.kind, recordId)

		if record is None:
			return HallyuResponse(
				success=False,
				statusCode=404,
				error={"message": f"{self.label} not found"}
			)

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=self.describe(record)
		)

	def describe(self, record: dict) -> dict:
		return self.annotate(record)

	def searchRecords(self, query: Optional[str], page=None, limit=None) -> HallyuResponse:
		if query is None or not query.strip():
			return HallyuResponse(
				success=False,
				statusCode=400,
				error={"message": "Search query is required"}
			)

		ranked = rankRecords(
			self.getRecords(),
			query,
			self.searchFields,
			self.kind,
			threshold=self.config.fuzzyThreshold
		)

		result = paginate(
			[{**result.record, "relevanceScore": result.relevanceScore} for result in ranked],
			resolvePage(page),
			resolveLimit(limit, default=self.config.defaultPageLimit, maximum=self.config.maxPageLimit),
			maxLimit=self.config.maxPageLimit
		)
		result.data = [self.annotate(record) for record in result.data]

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=result,
			meta={"searchQuery": query, "totalResults": len(ranked)}
		)
