"""Response envelope shared by every router."""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ApiResponse(BaseModel, Generic[DataT]):
    """JSON envelope: ``data`` on success, ``error`` otherwise."""

    success: bool = True
    data: Optional[DataT] = None
    error: Optional[str] = None
    cached: bool = False
    timestamp: datetime = Field(default_factory=utc_now)

    @classmethod
    def ok(cls, data: Any, cached: bool = False) -> "ApiResponse":
        return cls(success=True, data=data, cached=cached)

    @classmethod
    def fail(cls, error: str) -> "ApiResponse":
        return cls(success=False, error=error)


class CacheClearResult(BaseModel):
    """Outcome of a cache refresh request."""

    cleared: Union[int, str] = Field(..., description="Entries removed, or 'all'")
    pattern: Optional[str] = None
    message: Optional[str] = None


class CacheStats(BaseModel):
    """Snapshot of ``CacheStore.stats()``."""

    entries: int
    rate_limits: int
    hits: int
    misses: int
    hit_rate: float

    @classmethod
    def from_store(cls, stats: Dict[str, Any]) -> "CacheStats":
        return cls(**stats)
