"""
A single named cache region over a backing store.
"""

from dataclasses import dataclass
from typing import Any, Optional

from shared.logging import get_logger
from shared.metrics import CacheMetrics

from .null_policy import from_store_value, to_store_key, to_store_value
from .stores import MISSING, KeyValueStore


@dataclass(frozen=True)
class CachedValue:
    """Wrapper returned for a cache hit; ``value`` may be None."""

    value: Any

    def get(self) -> Any:
        return self.value


class NamespacedCache:
    """Get/put/evict/clear for one namespace of a key-value store.

    ``get`` returns None when there is no entry and a ``CachedValue`` when
    there is one, so a cached ``None`` is still a hit. Store failures are
    not caught here.
    """

    def __init__(self, name: str, store: KeyValueStore, metrics: Optional[CacheMetrics] = None):
        self._name = name
        self._store = store
        self.metrics = metrics
        self.logger = get_logger("argcache.cache").bind(namespace=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def store(self) -> KeyValueStore:
        """The underlying store, shared with every other namespace."""
        return self._store

    async def get(self, key: Any) -> Optional[CachedValue]:
        """Look up ``key``; None on a miss."""
        store_key = to_store_key(key)
        raw = await self._store.get(self._name, store_key)
        if raw is MISSING:
            self.logger.debug("Cache miss", key=store_key)
            if self.metrics:
                self.metrics.record_miss(self._name)
            return None

        self.logger.debug("Cache hit", key=store_key)
        if self.metrics:
            self.metrics.record_hit(self._name)
        return CachedValue(from_store_value(raw))

    async def put(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing entry."""
        store_key = to_store_key(key)
        await self._store.put(self._name, store_key, to_store_value(value))
        self.logger.debug("Cached value", key=store_key)
        if self.metrics:
            self.metrics.record_put(self._name)

    async def put_if_absent(self, key: Any, value: Any) -> Optional[CachedValue]:
        """Store ``value`` unless ``key`` already has an entry.

        Returns None when the value was stored, otherwise the entry that was
        already there.
        """
        store_key = to_store_key(key)
        if await self._store.put_if_absent(self._name, store_key, to_store_value(value)):
            self.logger.debug("Cached value", key=store_key)
            if self.metrics:
                self.metrics.record_put(self._name)
            return None
        existing = await self._store.get(self._name, store_key)
        if existing is MISSING:
            # evicted between the two calls
            return await self.put_if_absent(key, value)
        return CachedValue(from_store_value(existing))

    async def evict(self, key: Any) -> None:
        """Remove the entry for ``key`` if there is one."""
        store_key = to_store_key(key)
        removed = await self._store.delete(self._name, store_key)
        self.logger.debug("Evicted entry", key=store_key, removed=removed)
        if removed and self.metrics:
            self.metrics.record_eviction(self._name)

    async def clear(self) -> None:
        """Remove every entry in this namespace."""
        await self._store.clear_namespace(self._name)
        self.logger.info("Cleared cache")
        if self.metrics:
            self.metrics.record_clear(self._name)

    def __repr__(self) -> str:
        return f"NamespacedCache(name={self._name!r})"
