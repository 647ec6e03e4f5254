import time
from typing import Optional

from hallyu_api.core.logging import crudLogger
from hallyu_api.crud.actor import HallyuActorRequest
from hallyu_api.crud.artist import HallyuArtistRequest
from hallyu_api.crud.company import HallyuCompanyRequest
from hallyu_api.crud.group import HallyuGroupRequest
from hallyu_api.crud.hallyu_request import HallyuRequest
from hallyu_api.crud.hallyu_response import HallyuResponse
from hallyu_api.models.search import (
	SearchResults,
	SearchTypeEnum,
	SuggestionItem,
	Suggestions
)
from hallyu_api.query.pagination import resolveLimit
from hallyu_api.query.relevance import mergeRankedResults, rankRecords


# order of the kinds decides ties between equally scored results
SEARCH_RESOURCES = [
	(SearchTypeEnum.ARTISTS, HallyuArtistRequest),
	(SearchTypeEnum.GROUPS, HallyuGroupRequest),
	(SearchTypeEnum.ACTORS, HallyuActorRequest),
	(SearchTypeEnum.COMPANIES, HallyuCompanyRequest),
]

SUGGESTION_LIMIT = 20


class HallyuSearchRequest(HallyuRequest):

	def rankAll(self, query: str, searchType: SearchTypeEnum, fuzzy: bool):
		rankedGroups = []
		for resourceType, resourceClass in SEARCH_RESOURCES:
			if searchType not in (SearchTypeEnum.ALL, resourceType):
				continue

			resource = resourceClass(self.config, self.data)
			rankedGroups.append(rankRecords(
				resource.getRecords(),
				query,
				resource.searchFields,
				resource.kind,
				fuzzy=fuzzy,
				threshold=self.config.searchFuzzyThreshold
			))

		return mergeRankedResults(*rankedGroups)

	def globalSearch(
		self,
		query: Optional[str],
		searchType: SearchTypeEnum = SearchTypeEnum.ALL,
		limit=None,
		fuzzy: bool = True
	) -> HallyuResponse:
		start_time = time.time()

		if query is None or not query.strip():
			return HallyuResponse(
				success=False,
				statusCode=400,
				error={"message": "Query string cannot be empty."}
			)

		searchType = SearchTypeEnum(searchType)
		limit = resolveLimit(limit, default=self.config.defaultPageLimit, maximum=self.config.maxPageLimit)

		results = self.rankAll(query, searchType, fuzzy)[:limit]

		time_taken_ms = (time.time() - start_time) * 1000
		crudLogger.info(f"search q={query!r} type={searchType.value} results={len(results)} took={time_taken_ms:.1f}ms")

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=SearchResults(
				query=query,
				type=searchType,
				totalResults=len(results),
				results=results,
				time_taken_ms=time_taken_ms
			)
		)

	def getSuggestions(self, query: Optional[str], limit=None) -> HallyuResponse:
		if query is None or len(query.strip()) < 2:
			return HallyuResponse(
				success=False,
				statusCode=400,
				error={"message": "Suggestions need at least 2 characters."}
			)

		limit = resolveLimit(limit, default=10, maximum=SUGGESTION_LIMIT)
		results = self.rankAll(query, SearchTypeEnum.ALL, fuzzy=True)[:limit]

		suggestions = [
			SuggestionItem(
				text=result.record.get("StageName") or result.record.get("Name"),
				type=result.type,
				relevance=result.relevanceScore
			)
			for result in results
		]

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=Suggestions(query=query, suggestions=suggestions)
		)
