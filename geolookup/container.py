"""Engine construction and the process-wide default geocoder.

Applications that want explicit control build their own Geocoder (or call
create_geocoder) and pass it around. The module-level helpers in
``geolookup`` use a default instance that is created on first use and can
be reset in tests.
"""

from __future__ import annotations

import threading
from typing import Optional

from .adapters.cache import InMemoryCache
from .config import AppConfig, get_config
from .ports.cache import CacheStorePort
from .services.geocoder import Geocoder


def create_geocoder(
    config: Optional[AppConfig] = None,
    cache_store: Optional[CacheStorePort] = None,
) -> Geocoder:
    """Create a geocoder with default production bindings.

    Args:
        config: Optional configuration override.
        cache_store: Optional store. When omitted and caching is enabled
            in the configuration, an InMemoryCache is created.

    Returns:
        A configured Geocoder.
    """
    config = config or get_config()

    if cache_store is None and config.cache.enabled:
        cache_store = InMemoryCache(
            name="geolookup",
            default_ttl_seconds=config.cache.ttl_seconds,
            max_size=config.cache.max_size,
        )

    return Geocoder(config=config.lookups, cache_store=cache_store)


# Global default geocoder (lazy initialized)
_default_geocoder: Optional[Geocoder] = None
_geocoder_lock = threading.Lock()


def get_geocoder() -> Geocoder:
    """Get the default geocoder, creating it if needed."""
    global _default_geocoder
    if _default_geocoder is None:
        with _geocoder_lock:
            if _default_geocoder is None:
                _default_geocoder = create_geocoder()
    return _default_geocoder


def set_geocoder(geocoder: Geocoder) -> None:
    """Install a specific geocoder as the default."""
    global _default_geocoder
    with _geocoder_lock:
        _default_geocoder = geocoder


def reset_geocoder() -> None:
    """Drop the default geocoder and the lookups it created."""
    global _default_geocoder
    with _geocoder_lock:
        if _default_geocoder is not None:
            _default_geocoder.lookups.reset()
        _default_geocoder = None
