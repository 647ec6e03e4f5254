import datetime
from typing import Any, Iterable, List, Optional

from hallyu_api.query.fields import getField


def parseIsoDate(value: Any) -> Optional[datetime.date]:
	""" Parse an ISO date or datetime string, returning None when the
	value is empty or not a date
	"""
	if isinstance(value, datetime.datetime):
		return value.date()
	if isinstance(value, datetime.date):
		return value
	if not isinstance(value, str) or not value.strip():
		return None

	try:
		return datetime.date.fromisoformat(value.strip()[:10])
	except ValueError:
		return None


def _today(today: Optional[datetime.date]) -> datetime.date:
	return today if today is not None else datetime.date.today()


def occurrenceInYear(date: datetime.date, year: int) -> datetime.date:
	try:
		return date.replace(year=year)
	except ValueError:
		# 29 February falls back to the 28th outside leap years
		return date.replace(year=year, day=28)


def nextOccurrence(date: datetime.date, today: Optional[datetime.date] = None) -> datetime.date:
	today = _today(today)
	thisYear = occurrenceInYear(date, today.year)
	if thisYear < today:
		return occurrenceInYear(date, today.year + 1)
	return thisYear


def calculateAge(birthDate: Any, today: Optional[datetime.date] = None) -> Optional[int]:
	birth = parseIsoDate(birthDate)
	if birth is None:
		return None

	today = _today(today)
	age = today.year - birth.year
	if occurrenceInYear(birth, today.year) > today:
		age -= 1
	return age


def daysUntilNextOccurrence(dateIso: Any, today: Optional[datetime.date] = None) -> Optional[int]:
	date = parseIsoDate(dateIso)
	if date is None:
		return None

	today = _today(today)
	return (nextOccurrence(date, today) - today).days


def upcomingWithinWindow(
	records: Iterable[dict],
	dateField: str,
	windowDays: int,
	today: Optional[datetime.date] = None,
	daysKey: str = "daysUntil"
) -> List[dict]:
	""" Records whose next annual occurrence of dateField falls between
	today and today + windowDays, both ends included.

	Each returned record is a copy carrying nextOccurrence and the days
	until it under daysKey.
	"""
	today = _today(today)
	endDate = today + datetime.timedelta(days=max(windowDays, 0))

	upcoming = []
	for record in records:
		date = parseIsoDate(getField(record, dateField))
		if date is None:
			continue

		occurrence = nextOccurrence(date, today)
		if today <= occurrence <= endDate:
			upcoming.append({
				**record,
				"nextOccurrence": occurrence.isoformat(),
				daysKey: (occurrence - today).days
			})

	return upcoming


def occurringOn(
	records: Iterable[dict],
	dateField: str,
	today: Optional[datetime.date] = None
) -> List[dict]:
	today = _today(today)
	matches = []
	for record in records:
		date = parseIsoDate(getField(record, dateField))
		if date is not None and occurrenceInYear(date, today.year) == today:
			matches.append(record)
	return matches

