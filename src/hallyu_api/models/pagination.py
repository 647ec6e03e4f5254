from pydantic import BaseModel, Field
from typing import List, Any


class PageMeta(BaseModel):
	currentPage: int
	totalPages: int
	totalItems: int
	itemsPerPage: int
	hasNextPage: bool
	hasPrevPage: bool


class PaginatedResult(BaseModel):
	data: List[Any] = Field(default_factory=list)
	pagination: PageMeta
