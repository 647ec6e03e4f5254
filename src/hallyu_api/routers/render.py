from fastapi.responses import JSONResponse

from hallyu_api.crud.hallyu_response import HallyuResponse
from hallyu_api.models.pagination import PaginatedResult
from hallyu_api.models.responses import formatError, formatResponse


def renderResponse(response: HallyuResponse) -> JSONResponse:
    """ Wrap a crud response in the JSON envelope
    """
    if not response.success:
        return JSONResponse(
            status_code=response.statusCode,
            content=formatError(
                response.error.get("message", "Request failed"),
                details=response.error.get("details"),
                statusCode=response.statusCode
            )
        )

    model = response.model
    if isinstance(model, PaginatedResult):
        content = formatResponse(
            data=model.data,
            message=response.message,
            pagination=model.pagination,
            **response.meta
        )
    else:
        content = formatResponse(
            data=model,
            message=response.message,
            **response.meta
        )

    return JSONResponse(
        status_code=response.statusCode,
        content=content
    )


def renderError(message: str, statusCode: int = 400, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=statusCode,
        content=formatError(message, details=details, statusCode=statusCode)
    )
