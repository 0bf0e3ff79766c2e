"""
Lazy registry of namespaced caches.
"""

import threading
from typing import Dict, Optional, Set

from shared.errors import InvalidArgumentError
from shared.logging import get_logger
from shared.metrics import CacheMetrics

from .cache import NamespacedCache
from .stores import KeyValueStore


class CacheManager:
    """Hands out one ``NamespacedCache`` per name, creating it on first use.

    All caches share the manager's store. Creation happens under a lock, so
    concurrent first calls for the same name get the same instance.
    """

    def __init__(self, store: KeyValueStore, *, metrics: Optional[CacheMetrics] = None):
        self.logger = get_logger("argcache.cache_manager")
        self.metrics = metrics
        self._store = store
        self._lock = threading.Lock()
        self._caches: Dict[str, NamespacedCache] = {}

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def get_cache(self, name: str) -> NamespacedCache:
        """Return the cache for ``name``, creating it if needed."""
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("Cache name must be a non-empty string", {"name": repr(name)})

        with self._lock:
            cache = self._caches.get(name)
            if cache is None:
                cache = NamespacedCache(name, self._store, metrics=self.metrics)
                self._caches[name] = cache
                self.logger.info("Created cache", namespace=name)
            return cache

    def cache_names(self) -> Set[str]:
        """Names of every cache created so far."""
        with self._lock:
            return set(self._caches)
