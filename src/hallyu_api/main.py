from hallyu_api.routers.artist import artistRouter
from hallyu_api.routers.group import groupRouter
from hallyu_api.routers.actor import actorRouter
from hallyu_api.routers.company import companyRouter
from hallyu_api.routers.search import router as search_router
from hallyu_api.routers.statistics import statisticsRouter
from hallyu_api.routers.render import renderError

from hallyu_api.middleware.process_time import add_process_time_header
from hallyu_api.core.logging import requestLogger
from hallyu_api.core.config import settings, appConfig
from hallyu_api.core.data import HallyuDataStore
from hallyu_api.models.responses import formatResponse

from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi import APIRouter, FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional

import logfire

API_VERSION = "2.0.0"
API_PREFIX = "/api/v2"

v2Router = APIRouter(prefix=API_PREFIX)


@v2Router.get("", tags=["General"])
def welcome():
    return formatResponse(
        message="Welcome to Hallyu API v2.0 - Comprehensive K-pop Database",
        version=API_VERSION,
        documentation="/docs",
        endpoints={
            "artists": f"{API_PREFIX}/artists",
            "groups": f"{API_PREFIX}/groups",
            "actors": f"{API_PREFIX}/actors",
            "companies": f"{API_PREFIX}/companies",
            "search": f"{API_PREFIX}/search",
            "statistics": f"{API_PREFIX}/stats",
        }
    )


v2Router.include_router(artistRouter)
v2Router.include_router(groupRouter)
v2Router.include_router(actorRouter)
v2Router.include_router(companyRouter)
v2Router.include_router(search_router)
v2Router.include_router(statisticsRouter)


async def LogRequestMiddleware(
    request: Request,
    call_next
):
    # track user agent
    requestPath = request.url.path
    requestUserAgent = request.headers.get("User-Agent")
    if request.client:
        requestClientAddress = request.client.host
    else:
        requestClientAddress = None

    #log the request
    requestLogger.info(f"Path: {requestPath}\tUserAgent: {requestUserAgent}\tIP: {requestClientAddress}")

    response = await call_next(request)
    return response


def validationErrorHandler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())[1:]),
            "message": error.get("msg")
        }
        for error in exc.errors()
    ]
    return renderError("Invalid query parameters", statusCode=400, details=details)


def httpErrorHandler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return renderError("Endpoint not found", statusCode=404)
    return renderError(str(exc.detail), statusCode=exc.status_code)


def unhandledErrorHandler(request: Request, exc: Exception):
    requestLogger.exception(f"Unhandled error on {request.url.path}: {str(exc)}")
    return renderError("Internal server error", statusCode=500)


def createApp(dataStore: Optional[HallyuDataStore] = None) -> FastAPI:
    """ Build the API around a data store; the dataset is loaded here,
    once, before the first request is served
    """
    app = FastAPI(
        root_path=settings.HALLYU_ROOT_PATH,
        title="Hallyu API",
        description="Read only API for K-pop artists, groups, actors and companies",
        version=API_VERSION
    )

    if settings.HALLYU_LOGFIRE_ENV and settings.HALLYU_LOGFIRE_TOKEN:
        logfire.configure(
            environment = settings.HALLYU_LOGFIRE_ENV,
            token = settings.HALLYU_LOGFIRE_TOKEN
        )
        logfire.instrument_fastapi(app)

    if dataStore is None:
        dataStore = HallyuDataStore(appConfig)
    if not dataStore.isLoaded:
        dataStore.reload()
    app.state.dataStore = dataStore
    requestLogger.info(str(dataStore.config))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.HALLYU_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    app.middleware('http')(add_process_time_header)
    app.middleware('http')(LogRequestMiddleware)

    app.add_exception_handler(RequestValidationError, validationErrorHandler)
    app.add_exception_handler(StarletteHTTPException, httpErrorHandler)
    app.add_exception_handler(Exception, unhandledErrorHandler)

    app.include_router(v2Router)

    @app.get("/healthz")
    def health_check():
        return {"status": "healthy", "version": API_VERSION}

    @app.get("/")
    def root():
        return formatResponse(
            message="Welcome to Hallyu API v2.0",
            version=API_VERSION,
            documentation="/docs",
            endpoints={
                "v2": API_PREFIX,
                "docs": "/docs",
                "health": "/healthz",
            }
        )

    return app


app = createApp()
