"""Cache storage protocol.

Defines the interface for any key/value store that holds validated
generation payloads with a time-to-live.

Implementations can include:
- Process memory (default)
- Redis
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.

    Example:
        ```python
        from career_coach.protocols import CacheStore

        store: CacheStore = InMemoryCacheRepository(ttl=3600)
        store.set('["quiz","Finance"]', {"questions": []})
        store.get('["quiz","Finance"]')
        ```
    """

    def get(self, key: str) -> Any | None:
        """Return the payload stored under key.

        Expired entries are evicted by this read and reported as absent.

        Args:
            key: Key produced by derive_cache_key

        Returns:
            The stored payload, or None if missing or older than the TTL
        """
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a payload, replacing any existing entry for key.

        Args:
            key: Key produced by derive_cache_key
            value: Validated payload
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete a single entry.

        Args:
            key: The key to delete

        Returns:
            True if an entry was removed, False otherwise
        """
        ...

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        ...

    def stats(self) -> dict:
        """Describe the store without modifying it.

        Returns:
            Dictionary with at least "count", "keys" and "ttl"
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
