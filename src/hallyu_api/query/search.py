from enum import Enum
from typing import Iterable, List, Optional, Sequence

from hallyu_api.query.fields import getField, isMissing
from hallyu_api.query.fuzzy import fuzzyMatch


DEFAULT_FUZZY_THRESHOLD = 0.8


class MatchTier(str, Enum):
	EXACT = "exact"
	PREFIX = "prefix"
	SUBSTRING = "substring"
	FUZZY = "fuzzy"


def isNameField(field: str) -> bool:
	return "Name" in field


def normalizeQuery(query: Optional[str]) -> str:
	if query is None:
		return ""
	return str(query).strip().lower()


def matchTier(
	value,
	searchTerm: str,
	allowFuzzy: bool = False,
	threshold: float = DEFAULT_FUZZY_THRESHOLD
) -> Optional[MatchTier]:
	""" Best tier at which a field value matches an already normalized
	search term, or None
	"""
	if isMissing(value) or not searchTerm:
		return None

	if isinstance(value, dict):
		return None
	if isinstance(value, (list, tuple)):
		# list fields match on their elements joined by spaces
		value = " ".join(str(elem) for elem in value if not isMissing(elem))

	value = str(value).lower()

	if value == searchTerm:
		return MatchTier.EXACT
	if value.startswith(searchTerm):
		return MatchTier.PREFIX
	if searchTerm in value:
		return MatchTier.SUBSTRING
	if allowFuzzy and fuzzyMatch(value, searchTerm, threshold):
		return MatchTier.FUZZY

	return None


def recordMatches(
	item: dict,
	searchTerm: str,
	searchFields: Sequence[str],
	fuzzy: bool = True,
	threshold: float = DEFAULT_FUZZY_THRESHOLD
) -> bool:
	return any(
		matchTier(
			getField(item, field),
			searchTerm,
			allowFuzzy=fuzzy and isNameField(field),
			threshold=threshold
		) is not None
		for field in searchFields
	)


def searchItems(
	items: Iterable[dict],
	query: Optional[str],
	searchFields: Sequence[str],
	fuzzy: bool = True,
	threshold: float = DEFAULT_FUZZY_THRESHOLD
) -> List[dict]:
	""" Records matching query on at least one of searchFields.

	Fields are compared case-insensitively as exact, prefix or substring
	matches; name fields additionally accept an edit distance match. An
	empty query keeps every record.
	"""
	searchTerm = normalizeQuery(query)
	if not searchTerm:
		return list(items)

	return [
		item for item in items
		if recordMatches(item, searchTerm, searchFields, fuzzy, threshold)
	]
