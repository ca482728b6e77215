"""Thread-safe in-memory cache store.

Default store for the result cache when caching is enabled without an
external backend. Entries can expire (TTL) and the store can be bounded,
in which case the least recently written entry goes first. Keys are
namespaced by the result cache prefix, so ``clear(prefix)`` drops one
application's results without touching the others sharing the store.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional


class _Entry(NamedTuple):
    payload: str
    expires_at: float

    def expired(self, now: float) -> bool:
        return now >= self.expires_at


@dataclass
class InMemoryCache:
    """In-memory implementation of CacheStorePort.

    Attributes:
        default_ttl_seconds: Lifetime of an entry (None = no expiry)
        max_size: Maximum number of live entries (None = unbounded)
        name: Store name, used in the logger name

    Example:
        store = InMemoryCache(name="geocoder", default_ttl_seconds=86400)
        geocoder = Geocoder(config=config.lookups, cache_store=store)
    """

    default_ttl_seconds: Optional[float] = None
    max_size: Optional[int] = None
    name: str = "memory"

    _entries: "OrderedDict[str, _Entry]" = field(default_factory=OrderedDict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_size is not None and self.max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {self.max_size}")
        if self.default_ttl_seconds is not None and self.default_ttl_seconds <= 0:
            raise ValueError(
                f"default_ttl_seconds must be positive, got {self.default_ttl_seconds}"
            )
        self._logger = logging.getLogger(f"geolookup.cache.{self.name}")

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expired(time.monotonic()):
                del self._entries[key]
                self._logger.debug("Entry expired", extra={"key": key})
                return None
            return entry.payload

    def set(self, key: str, value: str, ttl: Optional[float] = None) -> None:
        """Store a serialized result list.

        Rewriting a key moves it to the back of the eviction order. When
        the store is full, expired entries are dropped first and only then
        the oldest live one.

        Args:
            key: The cache key.
            value: The serialized payload.
            ttl: Lifetime of this entry, overriding default_ttl_seconds.
        """
        lifetime = ttl if ttl is not None else self.default_ttl_seconds
        now = time.monotonic()
        entry = _Entry(value, now + lifetime if lifetime is not None else float("inf"))

        with self._lock:
            self._entries.pop(key, None)
            if self.max_size is not None and len(self._entries) >= self.max_size:
                self._purge_expired(now)
                while len(self._entries) >= self.max_size:
                    evicted, _ = self._entries.popitem(last=False)
                    self._logger.debug("Entry evicted", extra={"key": evicted})
            self._entries[key] = entry

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self, prefix: str = "") -> int:
        """Remove every entry whose key starts with prefix (all by default)."""
        with self._lock:
            doomed = [key for key in self._entries if key.startswith(prefix)]
            for key in doomed:
                del self._entries[key]
        self._logger.info("Store cleared", extra={"prefix": prefix, "removed": len(doomed)})
        return len(doomed)

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self, prefix: str = "") -> List[str]:
        """Stored keys in eviction order, oldest first."""
        with self._lock:
            return [key for key in self._entries if key.startswith(prefix)]

    def _purge_expired(self, now: float) -> None:
        for key in [key for key, entry in self._entries.items() if entry.expired(now)]:
            del self._entries[key]
