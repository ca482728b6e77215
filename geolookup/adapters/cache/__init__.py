"""Cache adapters - Implementations of CacheStorePort.

Available implementations:
- InMemoryCache: Thread-safe in-memory store with optional TTL and size bound
"""

from .memory_cache import InMemoryCache

__all__ = ["InMemoryCache"]
