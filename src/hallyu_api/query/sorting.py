from typing import Any, Iterable, List

from hallyu_api.query.dates import parseIsoDate
from hallyu_api.query.fields import getField, isMissing


DATE_FIELDS = frozenset([
	"DateOfBirth",
	"Debut",
	"DebutDate",
])


def sortKey(value: Any, asDate: bool = False) -> tuple:
	# (rank, value): missing values rank lowest, numbers before strings
	if isMissing(value):
		return (0, 0)

	if asDate:
		date = parseIsoDate(value)
		if date is None:
			return (0, 0)
		return (1, date.toordinal())

	if isinstance(value, (bool, int, float)):
		return (1, float(value))

	return (2, str(value))


def sortItems(
	items: Iterable[dict],
	sortBy: str,
	order: str = "asc",
	dateFields: frozenset = DATE_FIELDS
) -> List[dict]:
	""" Stable sort of items by the value of sortBy.

	Records missing the field come first in ascending order and last in
	descending order. Fields named in dateFields compare as calendar dates.
	"""
	asDate = sortBy in dateFields
	return sorted(
		items,
		key=lambda item: sortKey(getField(item, sortBy), asDate),
		reverse=(str(order).lower() == "desc")
	)
