"""
Settings-driven construction of the key generator and cache manager.
"""

from typing import Mapping, Optional

from shared.config import CacheSettings, get_config
from shared.metrics import CacheMetrics

from .caching import CacheManager, RedisStore
from .keys import KeyGenerator, KeyStrategy, StrategyRegistry


def create_key_generator(strategies: Optional[Mapping[type, KeyStrategy]] = None) -> KeyGenerator:
    """Create a key generator with ``strategies`` registered up front."""
    registry = StrategyRegistry()
    for type_, strategy in (strategies or {}).items():
        registry.register(type_, strategy)
    return KeyGenerator(registry)


def create_cache_manager(
    settings: Optional[CacheSettings] = None,
    metrics: Optional[CacheMetrics] = None,
) -> CacheManager:
    """Create a Redis-backed cache manager from settings."""
    settings = settings or get_config()
    store = RedisStore(
        settings.redis_url,
        settings.key_prefix,
        socket_timeout=settings.socket_timeout,
        socket_connect_timeout=settings.socket_connect_timeout,
        health_check_interval=settings.health_check_interval,
    )
    return CacheManager(store, metrics=metrics)
