"""Cache entry domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for a cached generation payload.

    Entries are created on a successful generation and replaced, never
    mutated, when the same key is written again.

    Attributes:
        value: The validated payload (text or JSON-compatible dict)
        stored_at: Unix timestamp of the write
    """

    value: Any
    stored_at: float

    def age(self, now: float) -> float:
        """Seconds elapsed since the entry was stored."""
        return now - self.stored_at

    def is_expired(self, now: float, ttl: float) -> bool:
        """Check whether the entry is older than the TTL.

        An entry exactly ``ttl`` seconds old is still fresh.
        """
        return self.age(now) > ttl
