from fastapi import APIRouter, Depends, Query
from typing import Annotated, Optional

from hallyu_api.crud.group import HallyuGroupRequest
from hallyu_api.deps import getGroupRequest
from hallyu_api.models.query import SortKeyEnum, SortOrderEnum
from hallyu_api.routers.render import renderResponse

groupRouter = APIRouter(prefix="/groups", tags=["Groups"])


@groupRouter.get("", summary="List groups with filtering, sorting and pagination")
def listGroups(
    groupRequest: Annotated[HallyuGroupRequest, Depends(getGroupRequest)],
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[SortKeyEnum] = None,
    order: Optional[SortOrderEnum] = None,
    search: Annotated[Optional[str], Query(max_length=100)] = None,
    company: Annotated[Optional[str], Query(max_length=100)] = None,
    active: Optional[bool] = None,
    debutYear: Annotated[Optional[int], Query(ge=1900, le=2100)] = None,
    memberCount: Annotated[Optional[int], Query(ge=1, le=50)] = None,
):
    queryOptions = groupRequest.buildQueryOptions(
        page=page,
        limit=limit,
        sortKey=sort,
        sortOrder=order,
        filters={
            "Company": company,
            "Active": active,
            "CurrentMemberCount": memberCount,
        },
        searchQuery=search
    )

    response = groupRequest.listGroups(queryOptions, debutYear=debutYear)
    return renderResponse(response)


@groupRouter.get("/search", summary="Search groups ranked by relevance")
def searchGroups(
    groupRequest: Annotated[HallyuGroupRequest, Depends(getGroupRequest)],
    q: Annotated[str, Query(min_length=1, max_length=100)],
    page: Optional[str] = None,
    limit: Optional[str] = None,
):
    return renderResponse(groupRequest.searchRecords(q, page=page, limit=limit))


@groupRouter.get("/anniversaries/today", summary="Groups with a debut anniversary today")
def getTodaysAnniversaries(
    groupRequest: Annotated[HallyuGroupRequest, Depends(getGroupRequest)],
):
    return renderResponse(groupRequest.getTodaysAnniversaries())


@groupRouter.get("/anniversaries/upcoming", summary="Upcoming debut anniversaries")
def getUpcomingAnniversaries(
    groupRequest: Annotated[HallyuGroupRequest, Depends(getGroupRequest)],
    days: Annotated[Optional[int], Query(ge=0, le=366)] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
):
    response = groupRequest.getUpcomingAnniversaries(days=days, page=page, limit=limit)
    return renderResponse(response)


@groupRouter.get("/{groupId}", summary="Get a group by id")
def getGroup(
    groupId: int,
    groupRequest: Annotated[HallyuGroupRequest, Depends(getGroupRequest)],
):
    return renderResponse(groupRequest.getRecord(groupId))
