"""
Unit tests for NamespacedCache.
"""

import pytest
from unittest.mock import AsyncMock

from argcache.caching import (
    MISSING,
    NULL_KEY,
    NULL_VALUE,
    CachedValue,
    InMemoryStore,
    NamespacedCache,
)
from shared.errors import BackingStoreError
from shared.metrics import CacheMetrics


class TestNamespacedCache:
    """Test cases for NamespacedCache over the in-memory store."""

    @pytest.fixture
    def store(self):
        """Create an empty store."""
        return InMemoryStore()

    @pytest.fixture
    def metrics(self):
        """Create metrics on a private registry."""
        return CacheMetrics()

    @pytest.fixture
    def cache(self, store, metrics):
        """Create the cache under test."""
        return NamespacedCache("default", store, metrics=metrics)

    def test_name_and_store(self, cache, store):
        """Test cache exposes its name and store."""
        assert cache.name == "default"
        assert cache.store is store
        assert repr(cache) == "NamespacedCache(name='default')"

    @pytest.mark.asyncio
    async def test_get_missing(self, cache, metrics):
        """Test a missing key gives None."""
        assert await cache.get("key") is None
        assert metrics.sample("cache_misses_total", "default") == 1

    @pytest.mark.asyncio
    async def test_put_then_get(self, cache, store, metrics):
        """Test a stored value is returned wrapped."""
        await cache.put("key", "foo")

        result = await cache.get("key")
        assert result == CachedValue("foo")
        assert result.get() == "foo"
        assert store.contains("default", "key")
        assert metrics.sample("cache_puts_total", "default") == 1
        assert metrics.sample("cache_hits_total", "default") == 1

    @pytest.mark.asyncio
    async def test_put_overwrites(self, cache):
        """Test put replaces an existing entry."""
        await cache.put("key", "first")
        await cache.put("key", "second")

        assert (await cache.get("key")).value == "second"

    @pytest.mark.asyncio
    async def test_null_value_is_a_hit(self, cache, store):
        """Test a cached None differs from a missing entry."""
        await cache.put("null", None)

        result = await cache.get("null")
        assert result is not None
        assert result.value is None
        assert await store.get("default", "null") is NULL_VALUE
        assert await cache.get("other") is None

    @pytest.mark.asyncio
    async def test_null_key(self, cache, store):
        """Test a None key is stored under the reserved key."""
        await cache.put(None, {"id": 1})

        assert (await cache.get(None)).value == {"id": 1}
        assert store.contains("default", NULL_KEY)

    @pytest.mark.asyncio
    async def test_null_key_aliases_reserved_string(self, cache):
        """Test the reserved key string addresses the None key entry."""
        await cache.put(None, "via-none")
        assert (await cache.get(NULL_KEY)).value == "via-none"

        await cache.put(NULL_KEY, "via-string")
        assert (await cache.get(None)).value == "via-string"

    @pytest.mark.asyncio
    async def test_null_key_and_null_value(self, cache):
        """Test None key and None value together."""
        await cache.put(None, None)

        result = await cache.get(None)
        assert result == CachedValue(None)

    @pytest.mark.asyncio
    async def test_evict(self, cache, metrics):
        """Test evict removes an entry."""
        await cache.put("key", "foo")
        await cache.evict("key")

        assert await cache.get("key") is None
        assert metrics.sample("cache_evictions_total", "default") == 1

    @pytest.mark.asyncio
    async def test_evict_missing_is_noop(self, cache):
        """Test evicting an absent key does not fail."""
        await cache.evict("never-stored")
        await cache.evict(None)

        assert await cache.get("never-stored") is None

    @pytest.mark.asyncio
    async def test_evict_counts_only_removed_entries(self, cache, metrics):
        """Test evictions of absent keys are not counted."""
        await cache.evict("never-stored")
        assert metrics.sample("cache_evictions_total", "default") == 0

        await cache.put("key", None)
        await cache.evict("key")
        await cache.evict("key")
        assert metrics.sample("cache_evictions_total", "default") == 1

    @pytest.mark.asyncio
    async def test_clear_only_affects_own_namespace(self, store, metrics):
        """Test clear leaves other namespaces alone."""
        cache1 = NamespacedCache("cache1", store, metrics=metrics)
        cache2 = NamespacedCache("cache2", store, metrics=metrics)
        await cache1.put("foo1", "one")
        await cache2.put("foo2", "two")
        await cache2.put("foo3", None)

        await cache2.clear()

        assert (await cache1.get("foo1")).value == "one"
        assert await cache2.get("foo2") is None
        assert await cache2.get("foo3") is None
        assert metrics.sample("cache_clears_total", "cache2") == 1
        assert metrics.sample("cache_clears_total", "cache1") == 0

    @pytest.mark.asyncio
    async def test_cleared_cache_is_usable(self, cache):
        """Test a cleared cache accepts new entries."""
        await cache.put("key", "old")
        await cache.clear()
        await cache.put("key", "new")

        assert (await cache.get("key")).value == "new"

    @pytest.mark.asyncio
    async def test_same_key_in_different_namespaces(self, store):
        """Test namespaces partition the key space."""
        list_cache = NamespacedCache("list", store)
        object_cache = NamespacedCache("objectKey", store)
        await list_cache.put("", ["a", "b"])
        await object_cache.put("", "single")

        assert (await list_cache.get("")).value == ["a", "b"]
        assert (await object_cache.get("")).value == "single"

    @pytest.mark.asyncio
    async def test_put_if_absent_stores_new_value(self, cache):
        """Test put_if_absent stores when there is no entry."""
        assert await cache.put_if_absent("key", "foo") is None
        assert (await cache.get("key")).value == "foo"

    @pytest.mark.asyncio
    async def test_put_if_absent_keeps_existing_value(self, cache):
        """Test put_if_absent returns the existing entry."""
        await cache.put("key", None)

        existing = await cache.put_if_absent("key", "foo")
        assert existing == CachedValue(None)
        assert (await cache.get("key")).value is None

    @pytest.mark.asyncio
    async def test_put_if_absent_retries_after_concurrent_evict(self):
        """Test put_if_absent retries when the entry vanishes in between."""
        store = AsyncMock()
        store.put_if_absent.side_effect = [False, True]
        store.get.return_value = MISSING
        cache = NamespacedCache("default", store)

        assert await cache.put_if_absent("key", "foo") is None
        assert store.put_if_absent.await_count == 2

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self):
        """Test backing store failures reach the caller unchanged."""
        error = BackingStoreError("redis", "connection refused")
        store = AsyncMock()
        store.get.side_effect = error
        store.put.side_effect = error
        store.delete.side_effect = error
        store.clear_namespace.side_effect = error
        cache = NamespacedCache("default", store)

        for call in (cache.get("k"), cache.put("k", 1), cache.evict("k"), cache.clear()):
            with pytest.raises(BackingStoreError) as exc_info:
                await call
            assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_works_without_metrics(self, store):
        """Test metrics are optional."""
        cache = NamespacedCache("plain", store)
        await cache.put("k", 1)
        assert (await cache.get("k")).value == 1
        assert await cache.get("missing") is None
