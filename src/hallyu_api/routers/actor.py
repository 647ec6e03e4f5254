from fastapi import APIRouter, Depends, Query
from typing import Annotated, Optional

from hallyu_api.crud.actor import HallyuActorRequest
from hallyu_api.crud.artist import normalizeGender
from hallyu_api.deps import getActorRequest
from hallyu_api.models.query import SortKeyEnum, SortOrderEnum
from hallyu_api.routers.render import renderError, renderResponse

actorRouter = APIRouter(prefix="/actors", tags=["Actors"])


@actorRouter.get("", summary="List actors with filtering, sorting and pagination")
def listActors(
    actorRequest: Annotated[HallyuActorRequest, Depends(getActorRequest)],
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[SortKeyEnum] = None,
    order: Optional[SortOrderEnum] = None,
    search: Annotated[Optional[str], Query(max_length=100)] = None,
    company: Annotated[Optional[str], Query(max_length=100)] = None,
    gender: Optional[str] = None,
):
    genderCode = normalizeGender(gender)
    if gender is not None and genderCode is None:
        return renderError("Invalid gender. Use: male, female, M, or F")

    queryOptions = actorRequest.buildQueryOptions(
        page=page,
        limit=limit,
        sortKey=sort,
        sortOrder=order,
        filters={"Company": company, "Gender": genderCode},
        searchQuery=search
    )
    return renderResponse(actorRequest.listRecords(queryOptions))


@actorRouter.get("/search", summary="Search actors ranked by relevance")
def searchActors(
    actorRequest: Annotated[HallyuActorRequest, Depends(getActorRequest)],
    q: Annotated[str, Query(min_length=1, max_length=100)],
    page: Optional[str] = None,
    limit: Optional[str] = None,
):
    return renderResponse(actorRequest.searchRecords(q, page=page, limit=limit))


@actorRouter.get("/{actorId}", summary="Get an actor by id")
def getActor(
    actorId: int,
    actorRequest: Annotated[HallyuActorRequest, Depends(getActorRequest)],
):
    return renderResponse(actorRequest.getRecord(actorId))
