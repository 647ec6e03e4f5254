from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from enum import Enum


class SortOrderEnum(str, Enum):
	ASC = "asc"
	DESC = "desc"


class SortKeyEnum(str, Enum):
	NAME = "name"
	ALPHABETICAL = "alphabetical"
	DEBUT = "debut"
	RECENT = "recent"
	POPULARITY = "popularity"


class QueryOptions(BaseModel):
	page: int = Field(default=1, ge=1)
	limit: int = Field(default=20, ge=1)
	sortField: str
	sortOrder: SortOrderEnum = Field(default=SortOrderEnum.ASC)
	filters: Dict[str, Any] = Field(default_factory=dict)
	searchQuery: Optional[str] = Field(default=None)
