from pydantic import BaseModel, Field
from typing import Dict, Optional
import datetime


class OverviewStatistics(BaseModel):
	totalArtists: int
	totalGroups: int
	totalActors: int
	totalCompanies: int
	lastUpdated: datetime.datetime


class CompanyStatistics(BaseModel):
	name: str
	artistCount: int
	groupCount: int
	totalTalent: int


class GroupStatistics(BaseModel):
	total: int
	active: int
	inactive: int
	byCompany: Dict[str, int] = Field(default_factory=dict)
	byDebutYear: Dict[str, int] = Field(default_factory=dict)
	averageMemberCount: Optional[float] = Field(default=None)


class ArtistStatistics(BaseModel):
	total: int
	male: int
	female: int
	byCountry: Dict[str, int] = Field(default_factory=dict)
	byBirthYear: Dict[str, int] = Field(default_factory=dict)
	byGroup: Dict[str, int] = Field(default_factory=dict)
