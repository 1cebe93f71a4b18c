"""Redis implementation of CacheStore.

Payloads are stored as JSON strings under a namespaced key. Redis expires
keys on its own, and reads also compare the stored timestamp against the
TTL so the freshness rule matches the in-memory store exactly.
"""

import json
import time
from collections.abc import Callable
from typing import Any

import redis

from career_coach.config import get_redis_client, settings
from career_coach.entities import CacheEntryEntity


class RedisCacheRepository:
    """Redis-backed cache store shared between processes.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Keys passed in by callers are stored as ``{prefix}:{key}``; stats and
    clear only touch keys under that prefix.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
        ttl: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance (decode_responses=True). If None, creates default.
            prefix: Key namespace. Defaults to settings.
            ttl: Time-to-live for entries in seconds. Defaults to settings.
            clock: Source of Unix timestamps (overridable in tests).
        """
        self._client = redis_client or get_redis_client()
        self._prefix = prefix or settings.cache_key_prefix
        self._ttl = ttl or settings.cache_ttl
        self._clock = clock

    @classmethod
    def create(
        cls,
        prefix: str | None = None,
        ttl: int | None = None,
    ) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            prefix: Key namespace. If None, uses settings.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(prefix=prefix, ttl=ttl)

    def _redis_key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    def _scan(self) -> list[str]:
        keys = []
        for raw in self._client.scan_iter(match=f"{self._prefix}:*"):
            name = raw.decode() if isinstance(raw, bytes) else raw
            keys.append(name)
        return keys

    def get(self, key: str) -> Any | None:
        redis_key = self._redis_key(key)
        raw = self._client.get(redis_key)
        if raw is None:
            return None

        record = json.loads(raw)
        entry = CacheEntryEntity(value=record["value"], stored_at=float(record["stored_at"]))
        if entry.is_expired(self._clock(), self._ttl):
            self._client.delete(redis_key)
            return None

        return entry.value

    def set(self, key: str, value: Any) -> None:
        record = json.dumps({"value": value, "stored_at": self._clock()})
        # Redis may keep the key slightly longer than the TTL; reads re-check the age.
        self._client.set(self._redis_key(key), record, ex=self._ttl + 1)

    def delete(self, key: str) -> bool:
        result: int = self._client.delete(self._redis_key(key))  # type: ignore[assignment]
        return result > 0

    def clear(self) -> int:
        keys = self._scan()
        if not keys:
            return 0
        result: int = self._client.delete(*keys)  # type: ignore[assignment]
        return result

    def stats(self) -> dict:
        start = len(self._prefix) + 1
        keys = [name[start:] for name in self._scan()]
        return {
            "backend": "redis",
            "count": len(keys),
            "keys": keys,
            "ttl": self._ttl,
            "prefix": self._prefix,
        }

    def health_check(self) -> bool:
        try:
            result = self._client.ping()
            return bool(result)
        except redis.RedisError:
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
