from fastapi import APIRouter, Depends, Query
from typing import Annotated

from hallyu_api.crud.search import HallyuSearchRequest
from hallyu_api.deps import getSearchRequest
from hallyu_api.models.search import SearchTypeEnum
from hallyu_api.routers.render import renderResponse

router = APIRouter(
    prefix="/search",
    tags=["Search"]
)


@router.get("", summary="Search across artists, groups, actors and companies")
def globalSearch(
    searchRequest: Annotated[HallyuSearchRequest, Depends(getSearchRequest)],
    q: Annotated[str, Query(min_length=1, max_length=100, description="The search query string.")],
    type: SearchTypeEnum = SearchTypeEnum.ALL,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    fuzzy: bool = True,
):
    """
    Ranks matches from every requested record kind on one relevance scale.
    Exact, prefix and substring matches on earlier search fields score
    highest; approximate name matches are included when fuzzy is enabled.
    """
    response = searchRequest.globalSearch(q, searchType=type, limit=limit, fuzzy=fuzzy)
    return renderResponse(response)


@router.get("/suggestions", summary="Search suggestions for a partial query")
def getSuggestions(
    searchRequest: Annotated[HallyuSearchRequest, Depends(getSearchRequest)],
    q: Annotated[str, Query(min_length=2, max_length=50)],
    limit: Annotated[int, Query(ge=1, le=20)] = 10,
):
    return renderResponse(searchRequest.getSuggestions(q, limit=limit))
