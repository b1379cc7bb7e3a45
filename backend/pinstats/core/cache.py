"""
Process-wide cache and per-client rate-limit store.

One ``CacheStore`` is constructed in the application lifespan and injected
into routers and services; tests construct their own.
"""

import math
import threading
import time
from collections import deque
from typing import Any, Callable, Deque, Dict, Optional, Tuple

import structlog

logger = structlog.get_logger(__name__)

FIFTEEN_MINUTES = 15 * 60  # seconds

# Rate-limit checks between sweeps of idle client windows
CLEANUP_INTERVAL = 1000


class CacheStore:
    """TTL cache with lazy expiry plus a sliding-window rate limiter."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        cleanup_interval: int = CLEANUP_INTERVAL,
    ):
        """
        Initialize the store.

        Args:
            clock: Monotonic time source in seconds
            cleanup_interval: Run ``cleanup()`` every this many rate-limit checks
        """
        self._clock = clock
        self._cleanup_interval = cleanup_interval
        self._checks_since_cleanup = 0
        # key -> (value, inserted_at, ttl)
        self.cache: Dict[str, Tuple[Any, float, float]] = {}
        self.rate_limits: Dict[str, Deque[float]] = {}
        self._windows: Dict[str, float] = {}
        self.lock = threading.RLock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache if not expired.

        Args:
            key: Cache key

        Returns:
            Cached value if exists and not expired, None otherwise
        """
        with self.lock:
            entry = self.cache.get(key)
            if entry is None:
                self._misses += 1
                return None

            value, inserted_at, ttl = entry
            if self._clock() - inserted_at > ttl:
                del self.cache[key]
                self._misses += 1
                logger.debug("Cache expired", key=key)
                return None

            self._hits += 1
            logger.debug("Cache hit", key=key, hits=self._hits)
            return value

    def set(self, key: str, value: Any, ttl: float) -> None:
        """
        Set value in cache with TTL.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds
        """
        with self.lock:
            self.cache[key] = (value, self._clock(), ttl)
            logger.debug("Cache set", key=key, ttl=ttl)

    def delete(self, key: str) -> bool:
        """Delete a specific cache entry."""
        with self.lock:
            return self.cache.pop(key, None) is not None

    def clear(self) -> None:
        """Clear all entries from cache."""
        with self.lock:
            count = len(self.cache)
            self.cache.clear()
            self._hits = 0
            self._misses = 0
            logger.info("Cache cleared", entries_removed=count)

    def clear_pattern(self, pattern: str) -> int:
        """Remove every entry whose key contains ``pattern``."""
        with self.lock:
            matching = [key for key in self.cache if pattern in key]
            for key in matching:
                del self.cache[key]
            logger.info("Cache entries cleared", pattern=pattern, removed=len(matching))
            return len(matching)

    def is_limited(self, key: str, max_requests: int, window: float) -> bool:
        """
        Sliding-window rate-limit check.

        Records the request when it is allowed. Rejected requests are not
        recorded, so a client that keeps retrying is let through again once
        its oldest allowed request leaves the window.

        Args:
            key: Rate-limit key (scope + client)
            max_requests: Requests allowed per window
            window: Window length in seconds

        Returns:
            True if the request must be rejected
        """
        with self.lock:
            now = self._clock()
            timestamps = self.rate_limits.setdefault(key, deque())
            self._windows[key] = window
            self._prune(timestamps, now, window)

            limited = len(timestamps) >= max_requests
            if limited:
                logger.info("Rate limit reached", key=key, window=window)
            else:
                timestamps.append(now)

            self._checks_since_cleanup += 1
            if self._checks_since_cleanup >= self._cleanup_interval:
                self.cleanup()
            return limited

    def retry_after(self, key: str, window: float) -> int:
        """Seconds until the oldest request for ``key`` leaves the window."""
        with self.lock:
            timestamps = self.rate_limits.get(key)
            if not timestamps:
                return 0
            remaining = window - (self._clock() - timestamps[0])
            return max(math.ceil(remaining), 1)

    def cleanup(self) -> int:
        """Drop expired cache entries and empty rate-limit windows."""
        with self.lock:
            self._checks_since_cleanup = 0
            now = self._clock()
            expired = [
                key
                for key, (_, inserted_at, ttl) in self.cache.items()
                if now - inserted_at > ttl
            ]
            for key in expired:
                del self.cache[key]

            for key, stamps in list(self.rate_limits.items()):
                self._prune(stamps, now, self._windows.get(key, 0.0))
                if not stamps:
                    del self.rate_limits[key]
                    self._windows.pop(key, None)

            return len(expired)

    @staticmethod
    def _prune(timestamps: Deque[float], now: float, window: float) -> None:
        while timestamps and now - timestamps[0] >= window:
            timestamps.popleft()

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self.lock:
            total = self._hits + self._misses
            return {
                "entries": len(self.cache),
                "rate_limits": len(self.rate_limits),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": self._hits / total if total > 0 else 0.0,
            }

    def __len__(self) -> int:
        """Get number of entries in cache."""
        return len(self.cache)
