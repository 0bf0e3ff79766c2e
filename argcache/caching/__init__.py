"""
Caching package.

Namespaced caches over a pluggable key-value store, with null keys and
null values mapped to sentinels, and a manager creating namespaces on
first access.
"""

from .null_policy import NULL_KEY, NULL_VALUE, NullValue
from .stores import MISSING, KeyValueStore, InMemoryStore, RedisStore
from .cache import CachedValue, NamespacedCache
from .manager import CacheManager

__all__ = [
    "NULL_KEY",
    "NULL_VALUE",
    "NullValue",
    "MISSING",
    "KeyValueStore",
    "InMemoryStore",
    "RedisStore",
    "CachedValue",
    "NamespacedCache",
    "CacheManager",
]
