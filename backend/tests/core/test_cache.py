"""
Tests for the cache and rate-limit store.
"""

from pinstats.core.cache import FIFTEEN_MINUTES, CacheStore


class TestCacheStore:
    """Test cases for TTL caching."""

    def test_set_and_get(self, cache_store):
        """Test setting and getting cache entries."""
        cache_store.set("test_key", "test_value", ttl=60)
        assert cache_store.get("test_key") == "test_value"
        assert len(cache_store) == 1

    def test_get_nonexistent_key(self, cache_store):
        """Test getting nonexistent key."""
        assert cache_store.get("nonexistent_key") is None

    def test_lazy_expiration(self, cache_store, clock):
        """Entries expire on read once their age exceeds the TTL."""
        cache_store.set("test_key", "test_value", ttl=60)

        clock.advance(60)
        assert cache_store.get("test_key") == "test_value"

        clock.advance(0.5)
        assert cache_store.get("test_key") is None
        assert "test_key" not in cache_store.cache

    def test_default_clock_is_monotonic(self):
        """A store built without a clock works with real time."""
        store = CacheStore()
        store.set("key", {"a": 1}, ttl=FIFTEEN_MINUTES)
        assert store.get("key") == {"a": 1}

    def test_delete(self, cache_store):
        """Test deleting a single entry."""
        cache_store.set("key1", "value1", ttl=60)
        assert cache_store.delete("key1") is True
        assert cache_store.delete("key1") is False
        assert cache_store.get("key1") is None

    def test_clear(self, cache_store):
        """Test clearing cache."""
        cache_store.set("key1", "value1", ttl=60)
        cache_store.set("key2", "value2", ttl=60)
        cache_store.get("key1")

        cache_store.clear()

        assert len(cache_store) == 0
        assert cache_store.stats()["hits"] == 0

    def test_clear_pattern(self, cache_store):
        """Only keys containing the pattern are removed."""
        cache_store.set("combined:1:none", "a", ttl=60)
        cache_store.set("combined:none:2", "b", ttl=60)
        cache_store.set("ifpa:player:1", "c", ttl=60)

        assert cache_store.clear_pattern("combined") == 2
        assert cache_store.get("ifpa:player:1") == "c"
        assert cache_store.get("combined:1:none") is None

    def test_stats(self, cache_store):
        """Test hit/miss accounting."""
        cache_store.set("key", "value", ttl=60)
        cache_store.get("key")
        cache_store.get("missing")

        stats = cache_store.stats()
        assert stats["entries"] == 1
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 0.5

    def test_stats_empty(self, cache_store):
        """Hit rate is zero before any lookup."""
        assert cache_store.stats()["hit_rate"] == 0.0

    def test_cleanup(self, cache_store, clock):
        """Cleanup drops expired entries and idle rate-limit windows."""
        cache_store.set("short", 1, ttl=10)
        cache_store.set("long", 2, ttl=100)
        cache_store.is_limited("client", max_requests=5, window=30)

        clock.advance(50)
        removed = cache_store.cleanup()

        assert removed == 1
        assert "short" not in cache_store.cache
        assert "long" in cache_store.cache
        assert cache_store.rate_limits == {}


class TestRateLimiting:
    """Test cases for the sliding-window limiter."""

    def test_allows_up_to_budget(self, cache_store):
        """The request after the budget is rejected."""
        for _ in range(10):
            assert cache_store.is_limited("client", 10, 60) is False
        assert cache_store.is_limited("client", 10, 60) is True

    def test_window_slides(self, cache_store, clock):
        """Requests leave the window after its length has passed."""
        for _ in range(3):
            cache_store.is_limited("client", 3, 60)
        assert cache_store.is_limited("client", 3, 60) is True

        clock.advance(60)
        assert cache_store.is_limited("client", 3, 60) is False

    def test_partial_slide(self, cache_store, clock):
        """Only requests older than the window are forgotten."""
        cache_store.is_limited("client", 2, 60)
        clock.advance(30)
        cache_store.is_limited("client", 2, 60)
        assert cache_store.is_limited("client", 2, 60) is True

        clock.advance(30)
        assert cache_store.is_limited("client", 2, 60) is False
        assert cache_store.is_limited("client", 2, 60) is True

    def test_rejected_requests_not_recorded(self, cache_store, clock):
        """Rejected attempts do not extend the lockout."""
        cache_store.is_limited("client", 1, 60)
        clock.advance(30)
        assert cache_store.is_limited("client", 1, 60) is True

        clock.advance(30)
        assert cache_store.is_limited("client", 1, 60) is False

    def test_keys_are_independent(self, cache_store):
        """Each client key has its own budget."""
        assert cache_store.is_limited("a", 1, 60) is False
        assert cache_store.is_limited("a", 1, 60) is True
        assert cache_store.is_limited("b", 1, 60) is False

    def test_retry_after(self, cache_store, clock):
        """Retry-After counts down to when the oldest request expires."""
        cache_store.is_limited("client", 2, 60)
        cache_store.is_limited("client", 2, 60)
        clock.advance(20)

        assert cache_store.is_limited("client", 2, 60) is True
        assert cache_store.retry_after("client", 60) == 40

    def test_retry_after_unknown_key(self, cache_store):
        """Unknown keys need no wait."""
        assert cache_store.retry_after("nobody", 60) == 0

    def test_retry_after_full_window(self, cache_store):
        """A whole-second remainder is reported as is."""
        cache_store.is_limited("client", 1, 60)

        assert cache_store.is_limited("client", 1, 60) is True
        assert cache_store.retry_after("client", 60) == 60

    def test_retry_after_rounds_up(self, cache_store, clock):
        cache_store.is_limited("client", 1, 60)
        clock.advance(20.5)

        assert cache_store.retry_after("client", 60) == 40

    def test_idle_windows_swept_periodically(self, clock):
        """Idle client windows are dropped every ``cleanup_interval`` checks."""
        store = CacheStore(clock=clock, cleanup_interval=3)
        store.is_limited("idle", 5, 60)
        clock.advance(61)

        store.is_limited("active", 5, 60)
        assert "idle" in store.rate_limits

        store.is_limited("active", 5, 60)
        assert "idle" not in store.rate_limits
        assert len(store.rate_limits["active"]) == 2

    def test_sweep_keeps_expired_entries_out(self, clock):
        store = CacheStore(clock=clock, cleanup_interval=1)
        store.set("key", "value", ttl=10)
        clock.advance(11)

        store.is_limited("client", 5, 60)

        assert len(store) == 0
