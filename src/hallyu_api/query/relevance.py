from typing import Iterable, List, Optional, Sequence

from hallyu_api.models.search import RecordKindEnum, SearchResult
from hallyu_api.query.fields import getField
from hallyu_api.query.search import (
	DEFAULT_FUZZY_THRESHOLD,
	MatchTier,
	isNameField,
	matchTier,
	normalizeQuery
)


TIER_SCORES = {
	MatchTier.EXACT: 10,
	MatchTier.PREFIX: 7,
	MatchTier.SUBSTRING: 5,
	MatchTier.FUZZY: 3,
}


def fieldWeight(fieldCount: int, fieldIndex: int) -> int:
	return fieldCount - fieldIndex


def scoreRecord(
	query: Optional[str],
	record: dict,
	searchFields: Sequence[str],
	fuzzy: bool = True,
	threshold: float = DEFAULT_FUZZY_THRESHOLD
) -> float:
	""" Relevance of a record for query.

	Every field contributes its tier score multiplied by its weight, where
	earlier fields in searchFields weigh more.
	"""
	searchTerm = normalizeQuery(query)
	if not searchTerm:
		return 0

	fieldCount = len(searchFields)
	score = 0
	for index, field in enumerate(searchFields):
		tier = matchTier(
			getField(record, field),
			searchTerm,
			allowFuzzy=fuzzy and isNameField(field),
			threshold=threshold
		)
		if tier is not None:
			score += TIER_SCORES[tier] * fieldWeight(fieldCount, index)

	return score


def rankRecords(
	records: Iterable[dict],
	query: Optional[str],
	searchFields: Sequence[str],
	kind: RecordKindEnum,
	fuzzy: bool = True,
	threshold: float = DEFAULT_FUZZY_THRESHOLD
) -> List[SearchResult]:
	""" Score records of one kind, keeping those with a positive score,
	ordered by descending relevance
	"""
	results = []
	for record in records:
		score = scoreRecord(query, record, searchFields, fuzzy, threshold)
		if score > 0:
			results.append(SearchResult(record=record, type=kind, relevanceScore=score))

	return sortByRelevance(results)


def sortByRelevance(results: Iterable[SearchResult]) -> List[SearchResult]:
	return sorted(results, key=lambda result: result.relevanceScore, reverse=True)


def mergeRankedResults(*rankedGroups: Iterable[SearchResult]) -> List[SearchResult]:
	""" Merge per kind results into one list ordered by score. Ties keep
	the order in which the groups were given.
	"""
	merged = []
	for group in rankedGroups:
		merged.extend(group)
	return sortByRelevance(merged)
