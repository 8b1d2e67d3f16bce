# interfaces/kv_store.py
"""
Persistent key-value stores (local-storage analogue)

Synchronous string-to-string stores shared by the profile persistence layer
and the recommendation cache. Writes are last-write-wins at key granularity.
Backends:
- MemoryKeyValueStore: in-process dict with a byte quota (like browser storage)
- RedisKeyValueStore: Redis, namespaced under "citysense:"

Every backend failure is raised as StorageError so callers can absorb it.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

import redis
from loguru import logger

from ..config import settings
from ..errors import StorageError


@runtime_checkable
class PersistentKeyValueStore(Protocol):
    """Capability handed to every component that persists state"""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def keys(self) -> List[str]: ...


class MemoryKeyValueStore:
    """
    In-memory store with a capacity bound.

    Usage is measured as the UTF-8 size of keys plus values; a write that
    would exceed ``max_bytes`` raises StorageError and leaves the store
    unchanged.
    """

    def __init__(self, max_bytes: Optional[int] = None):
        self.max_bytes = max_bytes
        self._data: Dict[str, str] = {}

    @staticmethod
    def _entry_size(key: str, value: str) -> int:
        return len(key.encode("utf-8")) + len(value.encode("utf-8"))

    def used_bytes(self) -> int:
        return sum(self._entry_size(k, v) for k, v in self._data.items())

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.max_bytes is not None:
            current = self.used_bytes()
            if key in self._data:
                current -= self._entry_size(key, self._data[key])
            if current + self._entry_size(key, value) > self.max_bytes:
                raise StorageError(
                    f"Quota exceeded writing '{key}' "
                    f"({current + self._entry_size(key, value)} > {self.max_bytes} bytes)"
                )
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data.keys())


class RedisKeyValueStore:
    """Redis-backed store; keys live under a namespace prefix"""

    def __init__(self, client: Optional[redis.Redis] = None, namespace: str = "citysense:"):
        self.namespace = namespace
        if client is None:
            client = redis.Redis(
                host=settings.REDIS_HOST,
                port=settings.REDIS_PORT,
                db=settings.REDIS_DB,
                decode_responses=True,
                socket_timeout=5,
                socket_connect_timeout=5
            )
        self.redis_client = client

    def _key(self, key: str) -> str:
        return f"{self.namespace}{key}"

    @staticmethod
    def _text(value) -> Optional[str]:
        # clients built without decode_responses return bytes
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def get(self, key: str) -> Optional[str]:
        try:
            return self._text(self.redis_client.get(self._key(key)))
        except redis.RedisError as e:
            raise StorageError(f"Redis get error: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            self.redis_client.set(self._key(key), value)
        except redis.RedisError as e:
            raise StorageError(f"Redis set error: {e}") from e

    def remove(self, key: str) -> None:
        try:
            self.redis_client.delete(self._key(key))
        except redis.RedisError as e:
            raise StorageError(f"Redis delete error: {e}") from e

    def keys(self) -> List[str]:
        try:
            return [
                self._text(k)[len(self.namespace):]
                for k in self.redis_client.scan_iter(match=f"{self.namespace}*")
            ]
        except redis.RedisError as e:
            raise StorageError(f"Redis scan error: {e}") from e


def create_store(backend: Optional[str] = None) -> PersistentKeyValueStore:
    """
    Build the configured store.

    Falls back to the in-memory store when Redis cannot be reached, the same
    way the session stores degrade.
    """
    backend = backend or settings.STORE_BACKEND

    if backend == "redis":
        try:
            store = RedisKeyValueStore()
            store.redis_client.ping()
            logger.info(f"Key-value store connected to Redis at {settings.redis_url}")
            return store
        except redis.RedisError as e:
            logger.warning(f"Redis connection failed, using in-memory store: {e}")

    logger.info(f"Key-value store: memory (quota {settings.STORE_MAX_BYTES} bytes)")
    return MemoryKeyValueStore(max_bytes=settings.STORE_MAX_BYTES)
