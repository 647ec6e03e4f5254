from fastapi import APIRouter, Depends
from typing import Annotated

from hallyu_api.crud.statistics import HallyuStatisticsRequest
from hallyu_api.deps import getStatisticsRequest
from hallyu_api.routers.render import renderResponse

statisticsRouter = APIRouter(prefix="/stats", tags=["Statistics"])


@statisticsRouter.get("/overview")
def getOverview(
    statisticsRequest: Annotated[HallyuStatisticsRequest, Depends(getStatisticsRequest)],
):
    return renderResponse(statisticsRequest.getOverview())


@statisticsRouter.get("/companies")
def getCompanyStatistics(
    statisticsRequest: Annotated[HallyuStatisticsRequest, Depends(getStatisticsRequest)],
):
    return renderResponse(statisticsRequest.getCompanyStatistics())


@statisticsRouter.get("/groups")
def getGroupStatistics(
    statisticsRequest: Annotated[HallyuStatisticsRequest, Depends(getStatisticsRequest)],
):
    return renderResponse(statisticsRequest.getGroupStatistics())


@statisticsRouter.get("/artists")
def getArtistStatistics(
    statisticsRequest: Annotated[HallyuStatisticsRequest, Depends(getStatisticsRequest)],
):
    return renderResponse(statisticsRequest.getArtistStatistics())
