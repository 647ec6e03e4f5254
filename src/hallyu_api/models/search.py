from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from enum import Enum


class RecordKindEnum(str, Enum):
	ARTIST = "artist"
	GROUP = "group"
	ACTOR = "actor"
	COMPANY = "company"


class SearchTypeEnum(str, Enum):
	ALL = "all"
	ARTISTS = "artists"
	GROUPS = "groups"
	ACTORS = "actors"
	COMPANIES = "companies"


class SearchResult(BaseModel):
	record: Dict[str, Any]
	type: RecordKindEnum
	relevanceScore: float = Field(ge=0)


class SearchResults(BaseModel):
	query: str
	type: SearchTypeEnum
	totalResults: int
	results: List[SearchResult]
	time_taken_ms: float


class SuggestionItem(BaseModel):
	text: Optional[str] = Field(default=None)
	type: RecordKindEnum
	relevance: float


class Suggestions(BaseModel):
	query: str
	suggestions: List[SuggestionItem]
