"""Main FastAPI application for the pinstats backend."""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pinstats import __version__
from pinstats.core import (
    CacheStore,
    RateLimitError,
    ServiceException,
    Settings,
    UpstreamError,
    ValidationError,
    get_global_settings,
    setup_logging,
)
from pinstats.core.http import HTTPClient
from pinstats.core.middleware import RequestLoggingMiddleware
from pinstats.core.schemas import ApiResponse
from pinstats.features.dashboard.router import router as dashboard_router
from pinstats.features.refresh.router import router as refresh_router
from pinstats.features.stats.router import router as stats_router

logger = structlog.get_logger(__name__)

API_PREFIX = "/api/v1"


def _log_credential_configuration(settings: Settings) -> None:
    """Warn about missing provider credentials at startup."""
    if not settings.ifpa_api_key:
        logger.warning(
            "IFPA_API_KEY not configured, IFPA data will be unavailable",
            hint="Request a key at https://api.ifpapinball.com",
        )
    if not settings.matchplay_api_token:
        logger.warning(
            "MATCHPLAY_API_TOKEN not configured, opponent history will be unavailable",
            hint="Create a token in your Match Play account settings",
        )


def _error_response(
    status_code: int, message: str, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.fail(message).model_dump(mode="json"),
        headers=headers,
    )


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    logger.info("Request rejected", path=request.url.path, error=exc.message)
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def upstream_error_handler(
    request: Request, exc: UpstreamError
) -> JSONResponse:
    logger.warning(
        "Upstream failure surfaced",
        path=request.url.path,
        provider=exc.provider.value,
        error=str(exc),
    )
    return _error_response(status.HTTP_502_BAD_GATEWAY, str(exc))


async def rate_limit_error_handler(
    request: Request, exc: RateLimitError
) -> JSONResponse:
    headers = {"Retry-After": str(exc.retry_after)} if exc.retry_after else None
    return _error_response(status.HTTP_429_TOO_MANY_REQUESTS, exc.message, headers)


async def service_error_handler(
    request: Request, exc: ServiceException
) -> JSONResponse:
    logger.error(
        "Service error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    One ``CacheStore`` and one ``HTTPClient`` live on ``app.state`` for the
    lifetime of the process; routers reach them through dependencies.
    """
    settings = settings or get_global_settings()
    setup_logging(settings.log_level, json_logs=not settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting up pinstats application", version=__version__)
        _log_credential_configuration(settings)

        app.state.cache_store = CacheStore()
        app.state.http_client = HTTPClient(
            timeout=settings.http_timeout_seconds,
            retries=settings.http_retries,
            retry_delay=settings.http_retry_delay_seconds,
        )
        await app.state.http_client.start_session()
        yield
        logger.info("Shutting down pinstats application")
        await app.state.http_client.close()

    tags_metadata = [
        {
            "name": "dashboard",
            "description": "Combined IFPA + Match Play dashboard with opponent history.",
        },
        {
            "name": "providers",
            "description": "Single-provider IFPA and Match Play lookups.",
        },
        {
            "name": "cache",
            "description": "Cache statistics and invalidation.",
        },
        {
            "name": "health",
            "description": "Health check endpoints.",
        },
    ]

    app = FastAPI(
        title="pinstats - Pinball Player Stats",
        description="""
    Aggregates IFPA rankings and Match Play ratings into one dashboard.

    ## Features

    * **Dashboard**: IFPA and Match Play stats merged, with partial-failure tolerance
    * **Identity**: Missing provider ids resolved through profile cross-links
    * **Opponents**: Head-to-head records rebuilt from recent Match Play games

    ## Rate Limiting

    Each client gets 10 requests per minute per endpoint family.
    Responses are cached for 15 minutes; pass `refresh=true` to bypass.
    """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings

    app.add_exception_handler(ValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(UpstreamError, upstream_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RateLimitError, rate_limit_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ServiceException, service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.add_middleware(
        RequestLoggingMiddleware,
        slow_request_threshold=settings.slow_request_threshold_seconds,
    )

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(dashboard_router, prefix=API_PREFIX)
    app.include_router(stats_router, prefix=API_PREFIX)
    app.include_router(refresh_router, prefix=API_PREFIX)

    @app.get("/health", tags=["health"])
    @app.get(f"{API_PREFIX}/health", tags=["health"])
    async def health_check() -> Dict[str, Any]:
        """
        Health check endpoint.

        This endpoint can be used by monitoring tools and load balancers
        to check if the service is running correctly.
        """
        return {
            "status": "healthy",
            "message": "Application is running",
            "version": __version__,
            "debug": settings.debug,
        }

    return app


app = create_app()
