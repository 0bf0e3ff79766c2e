"""
Backing key-value stores for namespaced caches.

A store keeps raw values under (namespace, key) pairs and must be able to
drop one whole namespace in a single step. Keys and values arriving here
have already been shaped by ``null_policy``.
"""

import pickle
import threading
from contextlib import contextmanager
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import redis.asyncio as redis
from redis.exceptions import RedisError

from shared.errors import BackingStoreError
from shared.logging import get_logger


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Returned by ``get`` when there is no entry.
MISSING: Any = _Missing()


@runtime_checkable
class KeyValueStore(Protocol):
    """Operations a namespaced cache needs from its backing store."""

    async def get(self, namespace: str, key: str) -> Any:
        ...

    async def put(self, namespace: str, key: str, value: Any) -> None:
        ...

    async def put_if_absent(self, namespace: str, key: str, value: Any) -> bool:
        ...

    async def delete(self, namespace: str, key: str) -> bool:
        ...

    async def clear_namespace(self, namespace: str) -> None:
        ...


class InMemoryStore:
    """Process-local store, for tests and single-process use."""

    def __init__(self):
        self._lock = threading.Lock()
        self._namespaces: Dict[str, Dict[str, Any]] = {}

    async def get(self, namespace: str, key: str) -> Any:
        with self._lock:
            return self._namespaces.get(namespace, {}).get(key, MISSING)

    async def put(self, namespace: str, key: str, value: Any) -> None:
        with self._lock:
            self._namespaces.setdefault(namespace, {})[key] = value

    async def put_if_absent(self, namespace: str, key: str, value: Any) -> bool:
        with self._lock:
            entries = self._namespaces.setdefault(namespace, {})
            if key in entries:
                return False
            entries[key] = value
            return True

    async def delete(self, namespace: str, key: str) -> bool:
        with self._lock:
            entries = self._namespaces.get(namespace, {})
            if key not in entries:
                return False
            del entries[key]
            return True

    async def clear_namespace(self, namespace: str) -> None:
        with self._lock:
            self._namespaces.pop(namespace, None)

    def contains(self, namespace: str, key: str) -> bool:
        """Check for a raw entry without going through a cache."""
        with self._lock:
            return key in self._namespaces.get(namespace, {})


class RedisStore:
    """Redis store keeping each namespace in one hash.

    The hash for namespace ``n`` lives at ``"<key_prefix>:<n>"`` and its
    fields are the cache keys. Clearing a namespace deletes that hash in a
    single command, leaving every other namespace untouched. Values are
    pickled.

    Reading an entry unpickles bytes from Redis, which can run arbitrary
    code. Only point this store at a Redis instance whose writers are all
    trusted.
    """

    def __init__(
        self,
        redis_url: str,
        key_prefix: str = "argcache",
        *,
        client: Optional[redis.Redis] = None,
        socket_timeout: float = 5.0,
        socket_connect_timeout: float = 5.0,
        health_check_interval: int = 30,
    ):
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self.socket_timeout = socket_timeout
        self.socket_connect_timeout = socket_connect_timeout
        self.health_check_interval = health_check_interval
        self.logger = get_logger("argcache.store.redis")
        self._redis: Optional[redis.Redis] = client

    async def _get_redis(self) -> redis.Redis:
        """Get Redis connection."""
        if self._redis is None:
            self._redis = redis.from_url(
                self.redis_url,
                socket_timeout=self.socket_timeout,
                socket_connect_timeout=self.socket_connect_timeout,
                health_check_interval=self.health_check_interval,
            )
        return self._redis

    def _namespace_key(self, namespace: str) -> str:
        return f"{self.key_prefix}:{namespace}"

    @contextmanager
    def _translate_errors(self, operation: str, namespace: str):
        try:
            yield
        except (RedisError, pickle.PickleError) as exc:
            self.logger.error(
                "Redis operation failed",
                operation=operation,
                namespace=namespace,
                error=str(exc),
            )
            raise BackingStoreError(
                "redis",
                str(exc),
                {"operation": operation, "namespace": namespace},
            ) from exc

    async def get(self, namespace: str, key: str) -> Any:
        with self._translate_errors("get", namespace):
            client = await self._get_redis()
            payload = await client.hget(self._namespace_key(namespace), key)
            if payload is None:
                return MISSING
            return pickle.loads(payload)

    async def put(self, namespace: str, key: str, value: Any) -> None:
        with self._translate_errors("put", namespace):
            payload = pickle.dumps(value)
            client = await self._get_redis()
            await client.hset(self._namespace_key(namespace), key, payload)

    async def put_if_absent(self, namespace: str, key: str, value: Any) -> bool:
        with self._translate_errors("put_if_absent", namespace):
            payload = pickle.dumps(value)
            client = await self._get_redis()
            created = await client.hsetnx(self._namespace_key(namespace), key, payload)
        return bool(created)

    async def delete(self, namespace: str, key: str) -> bool:
        with self._translate_errors("delete", namespace):
            client = await self._get_redis()
            removed = await client.hdel(self._namespace_key(namespace), key)
        return bool(removed)

    async def clear_namespace(self, namespace: str) -> None:
        with self._translate_errors("clear_namespace", namespace):
            client = await self._get_redis()
            await client.delete(self._namespace_key(namespace))
        self.logger.info("Cleared namespace", namespace=namespace)

    async def ping(self) -> bool:
        with self._translate_errors("ping", ""):
            client = await self._get_redis()
            return bool(await client.ping())

    async def health_check(self) -> bool:
        """Check Redis health."""
        try:
            return await self.ping()
        except BackingStoreError:
            return False

    async def close(self):
        """Close the Redis connection."""
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None
            self.logger.info("Redis store closed")
