"""Tests for the TTL cache."""

from unittest.mock import AsyncMock

import pytest

from tekken_framedata.core.cache import DEFAULT_TTL_SECONDS, TTLCache


class TestTTLCache:
    """Tests for TTLCache.get_or_fetch."""

    def test_default_ttl_is_ten_minutes(self):
        """Test the fixed TTL."""
        assert DEFAULT_TTL_SECONDS == 600

    @pytest.mark.asyncio
    async def test_hit_within_ttl(self, clock):
        """Test that a live entry is returned without calling the fetcher again."""
        cache = TTLCache(clock=clock)
        value = {"framesNormal": []}
        fetcher = AsyncMock(return_value=value)

        first = await cache.get_or_fetch("jin", fetcher, ttl=600)
        clock.advance(599)
        second = await cache.get_or_fetch("jin", fetcher, ttl=600)

        assert first is value
        assert second is value
        assert fetcher.await_count == 1

    @pytest.mark.asyncio
    async def test_refetch_after_expiry(self, clock):
        """Test that the fetcher runs again once the TTL has elapsed."""
        cache = TTLCache(clock=clock)
        fetcher = AsyncMock(side_effect=["old", "new"])

        assert await cache.get_or_fetch("jin", fetcher, ttl=600) == "old"
        clock.advance(600)
        assert await cache.get_or_fetch("jin", fetcher, ttl=600) == "new"
        assert fetcher.await_count == 2

        clock.advance(10)
        assert await cache.get_or_fetch("jin", fetcher, ttl=600) == "new"
        assert fetcher.await_count == 2

    @pytest.mark.asyncio
    async def test_keys_are_independent(self, clock):
        """Test that entries do not leak across keys."""
        cache = TTLCache(clock=clock)

        await cache.get_or_fetch("jin", AsyncMock(return_value=1))
        await cache.get_or_fetch("kazuya", AsyncMock(return_value=2))

        assert len(cache) == 2
        assert "jin" in cache
        assert "law" not in cache

    @pytest.mark.asyncio
    async def test_fetch_failure_is_not_cached(self, clock):
        """Test that fetcher errors propagate and store nothing."""
        cache = TTLCache(clock=clock)
        fetcher = AsyncMock(side_effect=[RuntimeError("boom"), "ok"])

        with pytest.raises(RuntimeError):
            await cache.get_or_fetch("jin", fetcher)
        assert "jin" not in cache

        assert await cache.get_or_fetch("jin", fetcher) == "ok"
