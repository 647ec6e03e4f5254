from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List
import pathlib


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
            env_ignore_empty=True,
            extra="ignore"
        )
    HALLYU_DATA_DIR: str = Field(default="data")
    HALLYU_ARTISTS_FILE: str = Field(default="all_artists.json")
    HALLYU_GROUPS_FILE: str = Field(default="all_groups.json")
    HALLYU_ACTORS_FILE: str = Field(default="all_actors.json")

    HALLYU_DEFAULT_PAGE_LIMIT: int = Field(default=20, ge=1)
    HALLYU_MAX_PAGE_LIMIT: int = Field(default=100, ge=1)
    HALLYU_FUZZY_THRESHOLD: float = Field(default=0.8, ge=0, le=1)
    HALLYU_SEARCH_FUZZY_THRESHOLD: float = Field(default=0.7, ge=0, le=1)
    HALLYU_UPCOMING_DAYS: int = Field(default=30, ge=0)

    HALLYU_ROOT_PATH: str = Field(default="")
    HALLYU_CORS_ORIGINS: List[str] = Field(default=["http://localhost:5173"])
    HALLYU_LOG_FILE: str = Field(default="hallyu_api.log")

    HALLYU_LOGFIRE_ENV: Optional[str] = Field(default=None)
    HALLYU_LOGFIRE_TOKEN: Optional[str] = Field(default=None)


class HallyuConfig():
	def __init__(
			self,
			dataDir: str,
			artistsFile: str,
			groupsFile: str,
			actorsFile: str,
			defaultPageLimit: int = 20,
			maxPageLimit: int = 100,
			fuzzyThreshold: float = 0.8,
			searchFuzzyThreshold: float = 0.7,
			upcomingDays: int = 30
	):
		self.dataDir = dataDir
		self.artistsFile = artistsFile
		self.groupsFile = groupsFile
		self.actorsFile = actorsFile
		self.defaultPageLimit = defaultPageLimit
		self.maxPageLimit = maxPageLimit
		self.fuzzyThreshold = fuzzyThreshold
		self.searchFuzzyThreshold = searchFuzzyThreshold
		self.upcomingDays = upcomingDays

	def __str__(self):
		dataStr = f"Data:\n\tDirectory: {self.dataDir}\n\tFiles: {self.artistsFile}, {self.groupsFile}, {self.actorsFile}"
		queryStr = f"Query:\n\tPageLimit: {self.defaultPageLimit} (max {self.maxPageLimit})\n\tFuzzyThreshold: {self.fuzzyThreshold}"
		return f"Hallyu API configuration:\n{dataStr}\n{queryStr}"


# use a .env file beside the source tree when one exists
currentPath = pathlib.Path(__file__)
envPath = currentPath.parents[3] / ".env"

if envPath.exists():
    settings = Settings(_env_file=str(envPath))
else:
    settings = Settings()


appConfig = HallyuConfig(
	dataDir=settings.HALLYU_DATA_DIR,
	artistsFile=settings.HALLYU_ARTISTS_FILE,
	groupsFile=settings.HALLYU_GROUPS_FILE,
	actorsFile=settings.HALLYU_ACTORS_FILE,
	defaultPageLimit=settings.HALLYU_DEFAULT_PAGE_LIMIT,
	maxPageLimit=settings.HALLYU_MAX_PAGE_LIMIT,
	fuzzyThreshold=settings.HALLYU_FUZZY_THRESHOLD,
	searchFuzzyThreshold=settings.HALLYU_SEARCH_FUZZY_THRESHOLD,
	upcomingDays=settings.HALLYU_UPCOMING_DAYS
)
