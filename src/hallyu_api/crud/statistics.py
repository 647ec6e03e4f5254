import pandas
from typing import Dict, List

from hallyu_api.crud.hallyu_request import HallyuRequest
from hallyu_api.crud.hallyu_response import HallyuResponse
from hallyu_api.query.dates import parseIsoDate
from hallyu_api.models.statistics import (
	ArtistStatistics,
	CompanyStatistics,
	GroupStatistics,
	OverviewStatistics
)


def buildFrame(records, columns: List[str]) -> pandas.DataFrame:
	frame = pandas.DataFrame.from_records(list(records))
	for column in columns:
		if column not in frame.columns:
			frame[column] = None
	return frame


def countBy(series: pandas.Series) -> Dict[str, int]:
	series = series.dropna()
	series = series[series.astype(str).str.strip() != ""]
	counts = series.astype(str).value_counts(sort=False)
	return {str(key): int(value) for key, value in counts.items()}


def yearOf(series: pandas.Series) -> pandas.Series:
	years = series.map(lambda value: getattr(parseIsoDate(value), "year", None))
	return years.dropna().astype(int)


def countMatching(series: pandas.Series, values) -> int:
	return int(series.isin(values).sum())


class HallyuStatisticsRequest(HallyuRequest):

	def getOverview(self) -> HallyuResponse:
		return HallyuResponse(
			success=True,
			statusCode=200,
			model=OverviewStatistics(
				totalArtists=len(self.data.artists),
				totalGroups=len(self.data.groups),
				totalActors=len(self.data.actors),
				totalCompanies=len(self.data.companies),
				lastUpdated=self.data.loadedAt
			)
		)

	def getCompanyStatistics(self) -> HallyuResponse:
		companyStats = [
			CompanyStatistics(
				name=company["Name"],
				artistCount=company.get("ArtistCount", 0),
				groupCount=company.get("GroupCount", 0),
				totalTalent=company.get("ArtistCount", 0) + company.get("GroupCount", 0)
			)
			for company in self.data.companies
		]
		companyStats.sort(key=lambda stat: stat.totalTalent, reverse=True)

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=companyStats
		)

	def getGroupStatistics(self) -> HallyuResponse:
		groups = buildFrame(self.data.groups, ["Active", "Company", "Debut", "CurrentMemberCount"])

		memberCounts = pandas.to_numeric(groups["CurrentMemberCount"], errors="coerce").dropna()
		averageMemberCount = float(memberCounts.mean()) if len(memberCounts) else None

		groupStats = GroupStatistics(
			total=len(groups),
			active=countMatching(groups["Active"], ["Yes", True]),
			inactive=countMatching(groups["Active"], ["No", False]),
			byCompany=countBy(groups["Company"]),
			byDebutYear=countBy(yearOf(groups["Debut"])),
			averageMemberCount=averageMemberCount
		)

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=groupStats
		)

	def getArtistStatistics(self) -> HallyuResponse:
		artists = buildFrame(self.data.artists, ["Gender", "Country", "DateOfBirth", "Group"])

		artistStats = ArtistStatistics(
			total=len(artists),
			male=countMatching(artists["Gender"], ["M"]),
			female=countMatching(artists["Gender"], ["F"]),
			byCountry=countBy(artists["Country"]),
			byBirthYear=countBy(yearOf(artists["DateOfBirth"])),
			byGroup=countBy(artists["Group"])
		)

		return HallyuResponse(
			success=True,
			statusCode=200,
			model=artistStats
		)
