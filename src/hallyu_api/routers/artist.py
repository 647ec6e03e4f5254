from fastapi import APIRouter, Depends, Query
from typing import Annotated, Optional

from hallyu_api.crud.artist import HallyuArtistRequest, normalizeGender
from hallyu_api.deps import getArtistRequest
from hallyu_api.models.query import SortKeyEnum, SortOrderEnum
from hallyu_api.routers.render import renderError, renderResponse

artistRouter = APIRouter(prefix="/artists", tags=["Artists"])


@artistRouter.get("", summary="List artists with filtering, sorting and pagination")
def listArtists(
    artistRequest: Annotated[HallyuArtistRequest, Depends(getArtistRequest)],
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[SortKeyEnum] = None,
    order: Optional[SortOrderEnum] = None,
    search: Annotated[Optional[str], Query(max_length=100)] = None,
    gender: Optional[str] = None,
    country: Annotated[Optional[str], Query(max_length=50)] = None,
    group: Annotated[Optional[str], Query(max_length=100)] = None,
    company: Annotated[Optional[str], Query(max_length=100)] = None,
    birthYear: Annotated[Optional[int], Query(ge=1900, le=2100)] = None,
):
    genderCode = normalizeGender(gender)
    if gender is not None and genderCode is None:
        return renderError("Invalid gender. Use: male, female, M, or F")

    queryOptions = artistRequest.buildQueryOptions(
        page=page,
        limit=limit,
        sortKey=sort,
        sortOrder=order,
        filters={
            "Gender": genderCode,
            "Country": country,
            "Group": group,
            "Company": company,
        },
        searchQuery=search
    )

    response = artistRequest.listArtists(queryOptions, birthYear=birthYear)
    return renderResponse(response)


@artistRouter.get("/search", summary="Search artists ranked by relevance")
def searchArtists(
    artistRequest: Annotated[HallyuArtistRequest, Depends(getArtistRequest)],
    q: Annotated[str, Query(min_length=1, max_length=100, description="The search query string.")],
    page: Optional[str] = None,
    limit: Optional[str] = None,
):
    response = artistRequest.searchRecords(q, page=page, limit=limit)
    return renderResponse(response)


@artistRouter.get("/birthdays/today", summary="Artists celebrating a birthday today")
def getTodaysBirthdays(
    artistRequest: Annotated[HallyuArtistRequest, Depends(getArtistRequest)],
):
    return renderResponse(artistRequest.getTodaysBirthdays())


@artistRouter.get("/birthdays/upcoming", summary="Upcoming artist birthdays")
def getUpcomingBirthdays(
    artistRequest: Annotated[HallyuArtistRequest, Depends(getArtistRequest)],
    days: Annotated[Optional[int], Query(ge=0, le=366)] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
):
    response = artistRequest.getUpcomingBirthdays(days=days, page=page, limit=limit)
    return renderResponse(response)


@artistRouter.get("/{artistId}", summary="Get an artist by id")
def getArtist(
    artistId: int,
    artistRequest: Annotated[HallyuArtistRequest, Depends(getArtistRequest)],
):
    return renderResponse(artistRequest.getRecord(artistId))
