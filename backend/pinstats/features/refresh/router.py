"""Cache maintenance endpoints."""

from typing import Optional

import structlog
from fastapi import APIRouter, Query

from pinstats.core.dependencies import CacheStoreDep
from pinstats.core.schemas import ApiResponse, CacheClearResult, CacheStats

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/refresh", tags=["cache"])


@router.post("", response_model=ApiResponse[CacheClearResult])
async def clear_cache(
    cache: CacheStoreDep,
    pattern: Optional[str] = Query(None, description="Substring of keys to clear"),
) -> ApiResponse[CacheClearResult]:
    """Clear cache entries containing ``pattern``, or everything without one."""
    if pattern:
        count = cache.clear_pattern(pattern)
        return ApiResponse[CacheClearResult].ok(
            CacheClearResult(cleared=count, pattern=pattern)
        )

    cache.clear()
    return ApiResponse[CacheClearResult].ok(
        CacheClearResult(cleared="all", message="All cache cleared")
    )


@router.get("", response_model=ApiResponse[CacheStats])
async def get_cache_stats(cache: CacheStoreDep) -> ApiResponse[CacheStats]:
    """Cache entry count and hit statistics."""
    return ApiResponse[CacheStats].ok(CacheStats.from_store(cache.stats()))
