from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Optional
from hallyu_api.models.pagination import PageMeta
import datetime


def utcNow() -> datetime.datetime:
	return datetime.datetime.now(datetime.timezone.utc)


class ResponseEnvelope(BaseModel):
	""" Success body shared by every endpoint; extra keys carry endpoint
	specific metadata such as totalResults or daysAhead
	"""
	model_config = ConfigDict(extra="allow")

	status: str = Field(default="success")
	timestamp: datetime.datetime = Field(default_factory=utcNow)
	message: Optional[str] = Field(default=None)
	data: Any = Field(default=None)
	pagination: Optional[PageMeta] = Field(default=None)


class ErrorEnvelope(BaseModel):
	status: str = Field(default="error")
	timestamp: datetime.datetime = Field(default_factory=utcNow)
	message: str
	statusCode: int = Field(default=400)
	details: Optional[Any] = Field(default=None)


def dropEmpty(body: dict) -> dict:
	return {key: value for key, value in body.items() if value is not None}


def formatResponse(data: Any = None, message: Optional[str] = None, pagination: Optional[PageMeta] = None, **meta) -> dict:
	envelope = ResponseEnvelope(
		data=data,
		message=message,
		pagination=pagination,
		**meta
	)
	return dropEmpty(envelope.model_dump(mode="json"))


def formatError(message: str, details: Any = None, statusCode: int = 400) -> dict:
	envelope = ErrorEnvelope(
		message=message,
		details=details,
		statusCode=statusCode
	)
	return dropEmpty(envelope.model_dump(mode="json"))
