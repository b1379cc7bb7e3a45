"""Core dependencies for FastAPI application."""

from typing import Annotated, Awaitable, Callable, Optional

import structlog
from fastapi import Depends, Request

from .cache import CacheStore
from .config import Settings
from .exceptions import RateLimitError
from .http import HTTPClient
from .ifpa_api import IFPAClient
from .matchplay_api import MatchPlayClient

logger = structlog.get_logger(__name__)

UNKNOWN_CLIENT = "unknown"


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_cache_store(request: Request) -> CacheStore:
    """Process-wide cache created in the application lifespan."""
    return request.app.state.cache_store


def get_http_client(request: Request) -> HTTPClient:
    """Shared transport created in the application lifespan."""
    return request.app.state.http_client


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
CacheStoreDep = Annotated[CacheStore, Depends(get_cache_store)]
HTTPClientDep = Annotated[HTTPClient, Depends(get_http_client)]


def get_ifpa_client(http_client: HTTPClientDep, settings: SettingsDep) -> IFPAClient:
    """Get IFPA API client instance."""
    return IFPAClient(
        http_client, api_key=settings.ifpa_api_key, base_url=settings.ifpa_api_base
    )


def get_matchplay_client(
    http_client: HTTPClientDep, settings: SettingsDep
) -> MatchPlayClient:
    """Get Match Play API client instance."""
    return MatchPlayClient(
        http_client,
        api_token=settings.matchplay_api_token,
        base_url=settings.matchplay_api_base,
    )


IFPAClientDep = Annotated[IFPAClient, Depends(get_ifpa_client)]
MatchPlayClientDep = Annotated[MatchPlayClient, Depends(get_matchplay_client)]


def get_client_key(request: Request) -> str:
    """First ``X-Forwarded-For`` hop, else the socket peer, else ``unknown``."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


def wants_refresh(refresh: Optional[str]) -> bool:
    """Only the literal ``true`` bypasses the cache."""
    return (refresh or "").strip().lower() == "true"


def rate_limit(scope: str) -> Callable[..., Awaitable[None]]:
    """
    Build a dependency enforcing the per-client request budget for ``scope``.

    :param scope: Key prefix so each endpoint family has its own budget
    :returns: Dependency raising ``RateLimitError`` when the budget is spent

    :example:
        @router.get("/combined/me", dependencies=[Depends(rate_limit("combined"))])
    """

    async def check_rate_limit(
        request: Request, cache: CacheStoreDep, settings: SettingsDep
    ) -> None:
        client_key = get_client_key(request)
        key = f"{scope}:ratelimit:{client_key}"
        window = settings.rate_limit_window_seconds

        if cache.is_limited(key, settings.rate_limit_max_requests, window):
            logger.warning("Rate limit exceeded", scope=scope, client=client_key)
            raise RateLimitError(
                retry_after=cache.retry_after(key, window),
                context={"scope": scope, "client": client_key},
            )

    return check_rate_limit


__all__ = [
    "get_app_settings",
    "get_cache_store",
    "get_http_client",
    "get_ifpa_client",
    "get_matchplay_client",
    "get_client_key",
    "rate_limit",
    "wants_refresh",
    "SettingsDep",
    "CacheStoreDep",
    "HTTPClientDep",
    "IFPAClientDep",
    "MatchPlayClientDep",
]
