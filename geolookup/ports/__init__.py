"""Ports layer - Abstract interfaces (Protocols) for geolookup.

Ports define the contracts between the lookup engine and external
adapters. They enable dependency injection and make the engine testable.
"""

from .cache import CacheStorePort
from .lookup import LookupPort

__all__ = ["CacheStorePort", "LookupPort"]
