"""
argcache: cache the results of method-like calls in a remote key-value store.

Keys are synthesized from call arguments by ``KeyGenerator`` and used against
namespaces handed out by ``CacheManager``.
"""

from .keys import KeyGenerator, StrategyRegistry, default_strategy, attribute_strategy
from .caching import (
    CacheManager,
    CachedValue,
    NamespacedCache,
    InMemoryStore,
    RedisStore,
    NULL_KEY,
    NULL_VALUE,
)
from .factory import create_cache_manager, create_key_generator

__all__ = [
    "KeyGenerator",
    "StrategyRegistry",
    "default_strategy",
    "attribute_strategy",
    "CacheManager",
    "CachedValue",
    "NamespacedCache",
    "InMemoryStore",
    "RedisStore",
    "NULL_KEY",
    "NULL_VALUE",
    "create_cache_manager",
    "create_key_generator",
]
