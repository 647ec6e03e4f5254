from typing import Any, Optional


def getField(record: Optional[dict], path: str, default: Any = None) -> Any:
	""" Read a field from a record, following dotted paths into nested
	dicts and lists. Missing keys at any level return the default.
	"""
	if not isinstance(record, dict):
		return default

	if path in record:
		return record[path]

	current = record
	for part in path.split("."):
		if isinstance(current, dict):
			if part not in current:
				return default
			current = current[part]
		elif isinstance(current, (list, tuple)) and part.isdigit():
			index = int(part)
			if index >= len(current):
				return default
			current = current[index]
		else:
			return default

	return current


def isMissing(value: Any) -> bool:
	return value is None or value == ""
