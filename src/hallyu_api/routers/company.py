from fastapi import APIRouter, Depends, Query
from typing import Annotated, Optional

from hallyu_api.crud.company import HallyuCompanyRequest
from hallyu_api.deps import getCompanyRequest
from hallyu_api.models.query import SortKeyEnum, SortOrderEnum
from hallyu_api.routers.render import renderResponse

companyRouter = APIRouter(prefix="/companies", tags=["Companies"])


@companyRouter.get("", summary="List companies with filtering, sorting and pagination")
def listCompanies(
    companyRequest: Annotated[HallyuCompanyRequest, Depends(getCompanyRequest)],
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[SortKeyEnum] = None,
    order: Optional[SortOrderEnum] = None,
    search: Annotated[Optional[str], Query(max_length=100)] = None,
    type: Annotated[Optional[str], Query(max_length=50)] = None,
):
    queryOptions = companyRequest.buildQueryOptions(
        page=page,
        limit=limit,
        sortKey=sort,
        sortOrder=order,
        filters={"Type": type},
        searchQuery=search
    )
    return renderResponse(companyRequest.listRecords(queryOptions))


@companyRouter.get("/{companyId}", summary="Get a company with its artists and groups")
def getCompany(
    companyId: int,
    companyRequest: Annotated[HallyuCompanyRequest, Depends(getCompanyRequest)],
):
    return renderResponse(companyRequest.getRecord(companyId))
