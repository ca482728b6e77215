"""Cache store port - Injectable key/value store for lookup results.

The result cache (services/result_cache.py) serializes results to text and
hands them to a store implementing this protocol. Any store that can get
and set string values fits: the in-memory adapter, or a thin wrapper over
Redis, memcached, a database table...
"""

from __future__ import annotations

from typing import Optional, Protocol, Union


class CacheStorePort(Protocol):
    """Port for cache stores.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache)

    A store signals failure by raising; the result cache turns any such
    exception into a CacheError.
    """

    def get(self, key: str) -> Optional[Union[str, bytes]]:
        """Get a value from the store.

        Args:
            key: The cache key.

        Returns:
            The stored payload, or None if not found or expired.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value.

        Args:
            key: The cache key.
            value: The serialized payload.
        """
        ...

    def invalidate(self, key: str) -> bool:
        """Remove a single entry.

        Returns:
            True if the key existed and was removed, False otherwise.
        """
        ...

    def clear(self, prefix: str = "") -> int:
        """Remove every entry whose key starts with prefix.

        Args:
            prefix: Key prefix to match; the empty default clears all.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def size(self) -> int:
        """Return the number of stored entries."""
        ...
