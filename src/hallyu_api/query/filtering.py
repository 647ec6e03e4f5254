from typing import Any, Dict, Iterable, List

from hallyu_api.query.fields import getField, isMissing


def matchBoolean(itemValue: Any, expected: bool) -> bool:
	if isMissing(itemValue):
		# a record without the flag counts as "No"
		return expected is False

	if expected:
		return itemValue is True or itemValue == "Yes"

	return itemValue is False or itemValue == "No"


def matchNumber(itemValue: Any, expected) -> bool:
	if isinstance(itemValue, bool):
		return False
	try:
		return float(itemValue) == float(expected)
	except (TypeError, ValueError):
		return False


def matchConstraint(itemValue: Any, expected: Any) -> bool:
	# bool is checked ahead of the numeric branch since it subclasses int
	if isinstance(expected, bool):
		return matchBoolean(itemValue, expected)

	if isMissing(itemValue):
		return False

	if isinstance(expected, str):
		return expected.lower() in str(itemValue).lower()

	if isinstance(expected, (int, float)):
		return matchNumber(itemValue, expected)

	return itemValue == expected


def filterItems(items: Iterable[dict], filters: Dict[str, Any]) -> List[dict]:
	""" Keep the records satisfying every constraint in filters.

	Constraints whose expected value is None are ignored. Record order is
	preserved and the input is never modified.
	"""
	activeFilters = {
		field: expected for field, expected in (filters or {}).items()
		if expected is not None
	}

	return [
		item for item in items
		if all(
			matchConstraint(getField(item, field), expected)
			for field, expected in activeFilters.items()
		)
	]
