import datetime
import json
import pathlib
import threading
from typing import Any, Dict, List, Optional, Tuple

from hallyu_api.core.config import HallyuConfig
from hallyu_api.core.logging import dataLogger
from hallyu_api.models.search import RecordKindEnum


# keys whose canonical spelling is not just the capitalized key
KEY_ALIASES = {
	"id": "Id",
	"debutDate": "Debut",
	"DebutDate": "Debut",
	"dateOfBirth": "DateOfBirth",
	"birthday": "DateOfBirth",
}

MAJOR_LABELS = [
	"SM Entertainment",
	"YG Entertainment",
	"JYP Entertainment",
	"HYBE",
	"Starship Entertainment",
]

FOUNDED_YEARS = {
	"SM Entertainment": 1995,
	"YG Entertainment": 1996,
	"JYP Entertainment": 1997,
	"HYBE": 2005,
	"Starship Entertainment": 2008,
}


def canonicalKey(key: str) -> str:
	if key in KEY_ALIASES:
		return KEY_ALIASES[key]
	if not key:
		return key
	return key[0].upper() + key[1:]


def canonicalizeValue(value: Any) -> Any:
	if isinstance(value, dict):
		return canonicalizeRecord(value)
	if isinstance(value, list):
		return [canonicalizeValue(elem) for elem in value]
	return value


def canonicalizeRecord(record: Dict[str, Any]) -> Dict[str, Any]:
	""" Rewrite a record with PascalCase keys.

	Source files mix two casings (StageName and stageName); when both are
	present the first non empty value wins.
	"""
	canonical = {}
	for key, value in record.items():
		newKey = canonicalKey(key)
		if newKey in canonical and canonical[newKey] not in (None, ""):
			continue
		canonical[newKey] = canonicalizeValue(value)
	return canonical


def loadJsonFile(filePath: pathlib.Path) -> List[dict]:
	if not filePath.exists():
		dataLogger.warning(f"Data file missing: {filePath}")
		return []

	try:
		with open(filePath, "r", encoding="utf-8") as dataFile:
			content = json.load(dataFile)
	except (OSError, json.JSONDecodeError) as e:
		dataLogger.error(f"Error loading {filePath}: {str(e)}")
		return []

	if not isinstance(content, list):
		dataLogger.error(f"Error loading {filePath}: expected a list of records")
		return []

	return [elem for elem in content if isinstance(elem, dict)]


def getCompanyType(companyName: str) -> str:
	if companyName in MAJOR_LABELS:
		return "Major Label"
	return "Independent"


def generateCompanies(groups: List[dict], artists: List[dict]) -> List[dict]:
	""" Derive company records from the Company field of groups and artists,
	numbered in order of first appearance
	"""
	companyNames = []
	seen = set()
	for item in [*groups, *artists]:
		company = item.get("Company")
		if not isinstance(company, str) or not company.strip():
			continue
		company = company.strip()
		if company.lower() not in seen:
			seen.add(company.lower())
			companyNames.append(company)

	companies = []
	for index, name in enumerate(companyNames):
		companyArtists = [
			artist for artist in artists
			if isinstance(artist.get("Company"), str) and artist["Company"].strip().lower() == name.lower()
		]
		companyGroups = [
			group for group in groups
			if isinstance(group.get("Company"), str) and group["Company"].strip().lower() == name.lower()
		]
		companies.append({
			"Id": index + 1,
			"Name": name,
			"Type": getCompanyType(name),
			"Founded": FOUNDED_YEARS.get(name),
			"ArtistCount": len(companyArtists),
			"GroupCount": len(companyGroups),
			"Artists": companyArtists,
			"Groups": companyGroups,
		})

	return companies


def _coerceId(value: Any) -> Optional[int]:
	if isinstance(value, bool):
		return None
	try:
		return int(value)
	except (TypeError, ValueError):
		return None


class HallyuDataContext():
	""" Immutable snapshot of the loaded dataset handed to every request
	"""

	def __init__(
			self,
			artists: List[dict],
			groups: List[dict],
			actors: List[dict],
			companies: Optional[List[dict]] = None,
			loadedAt: Optional[datetime.datetime] = None
	):
		self.artists: Tuple[dict, ...] = tuple(canonicalizeRecord(elem) for elem in artists)
		self.groups: Tuple[dict, ...] = tuple(canonicalizeRecord(elem) for elem in groups)
		self.actors: Tuple[dict, ...] = tuple(canonicalizeRecord(elem) for elem in actors)

		if companies is None:
			companies = generateCompanies(list(self.groups), list(self.artists))
		self.companies: Tuple[dict, ...] = tuple(canonicalizeRecord(elem) for elem in companies)

		self.loadedAt = loadedAt or datetime.datetime.now(datetime.timezone.utc)

	def getCollection(self, kind: RecordKindEnum) -> Tuple[dict, ...]:
		collections = {
			RecordKindEnum.ARTIST: self.artists,
			RecordKindEnum.GROUP: self.groups,
			RecordKindEnum.ACTOR: self.actors,
			RecordKindEnum.COMPANY: self.companies,
		}
		return collections[RecordKindEnum(kind)]

	def findById(self, kind: RecordKindEnum, recordId: Any) -> Optional[dict]:
		targetId = _coerceId(recordId)
		if targetId is None:
			return None

		for record in self.getCollection(kind):
			if _coerceId(record.get("Id")) == targetId:
				return record
		return None

	def summary(self) -> Dict[str, int]:
		return {
			"artists": len(self.artists),
			"groups": len(self.groups),
			"actors": len(self.actors),
			"companies": len(self.companies),
		}

	def __str__(self):
		counts = self.summary()
		return f"Data loaded: {counts['artists']} artists, {counts['groups']} groups, {counts['actors']} actors, {counts['companies']} companies"


def loadDataContext(config: HallyuConfig) -> HallyuDataContext:
	dataDir = pathlib.Path(config.dataDir)

	context = HallyuDataContext(
		artists=loadJsonFile(dataDir / config.artistsFile),
		groups=loadJsonFile(dataDir / config.groupsFile),
		actors=loadJsonFile(dataDir / config.actorsFile),
	)

	dataLogger.info(str(context))
	return context


class HallyuDataStore():
	""" Holds the current data context. Reloading builds a complete new
	context and swaps the reference, so readers always see one snapshot.
	"""

	def __init__(self, config: HallyuConfig, context: Optional[HallyuDataContext] = None):
		self.config = config
		self._lock = threading.Lock()
		self._context = context

	@classmethod
	def fromContext(cls, config: HallyuConfig, context: HallyuDataContext):
		return cls(config, context)

	@property
	def isLoaded(self) -> bool:
		return self._context is not None

	@property
	def context(self) -> HallyuDataContext:
		if self._context is None:
			self.reload()
		return self._context

	def reload(self) -> HallyuDataContext:
		newContext = loadDataContext(self.config)
		with self._lock:
			self._context = newContext
		return newContext
