"""In-process implementation of CacheStore.

Entries live for the lifetime of the process. Expiry is lazy: an entry older
than the TTL is removed when it is next read, there is no background sweep.
Values are copied on the way in and out, so callers never share a stored object.
"""

import copy
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from career_coach.config import settings
from career_coach.entities import CacheEntryEntity


class InMemoryCacheRepository:
    """Dictionary-backed cache store with TTL and optional LRU bound.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    All reads and writes hold a lock because a read may evict.

    Example:
        ```python
        store = InMemoryCacheRepository.create(ttl=60)
        store.set("k", {"questions": []})
        store.get("k")  # {"questions": []}
        ```
    """

    def __init__(
        self,
        ttl: int | None = None,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the in-memory cache repository.

        Args:
            ttl: Time-to-live for entries in seconds. Defaults to settings.
            max_entries: Upper bound on stored entries; None means unbounded.
            clock: Source of Unix timestamps (overridable in tests).
        """
        self._ttl = ttl or settings.cache_ttl
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntryEntity] = OrderedDict()
        self._lock = threading.Lock()

    @classmethod
    def create(
        cls,
        ttl: int | None = None,
        max_entries: int | None = None,
    ) -> "InMemoryCacheRepository":
        """Factory method to create InMemoryCacheRepository with defaults.

        Args:
            ttl: Entry TTL in seconds. If None, uses settings.
            max_entries: Size bound. If None, uses settings (unbounded by default).

        Returns:
            Configured InMemoryCacheRepository
        """
        return cls(
            ttl=ttl,
            max_entries=max_entries if max_entries is not None else settings.cache_max_entries,
        )

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if entry.is_expired(self._clock(), self._ttl):
                del self._entries[key]
                return None

            self._entries.move_to_end(key)
            return copy.deepcopy(entry.value)

    def set(self, key: str, value: Any) -> None:
        entry = CacheEntryEntity(value=copy.deepcopy(value), stored_at=self._clock())
        with self._lock:
            self._entries[key] = entry
            self._entries.move_to_end(key)
            if self._max_entries is not None:
                while len(self._entries) > self._max_entries:
                    self._entries.popitem(last=False)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count

    def stats(self) -> dict:
        with self._lock:
            keys = list(self._entries.keys())
        return {
            "backend": "memory",
            "count": len(keys),
            "keys": keys,
            "ttl": self._ttl,
            "max_entries": self._max_entries,
        }

    def health_check(self) -> bool:
        return True

    @property
    def ttl(self) -> int:
        """Get the entry time-to-live in seconds."""
        return self._ttl
