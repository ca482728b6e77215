"""Geocoder service - the lookup coordinator.

This is the public entry point: it classifies a query, picks the lookup
for it, gets that lookup from the registry and runs it, through the
result cache when one is configured.
"""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass, field
from typing import Any, List, Optional

from ..config import LookupConfig, get_config
from ..domain.models import Coordinates, Result
from ..ports.cache import CacheStorePort
from .classifier import classify
from .registry import LookupName, LookupRegistry, select_lookup
from .result_cache import ResultCache


@dataclass
class Geocoder:
    """Lookup engine owning a provider registry and an optional cache.

    Usage:
        geocoder = Geocoder(config=LookupConfig(lookup="nominatim"))
        geocoder.search("Rue de Rivoli, Paris")
        geocoder.coordinates("8.8.8.8")
        geocoder.address([48.8566, 2.3522])

    Attributes:
        config: Lookup configuration (street override, cache prefix, keys)
        cache_store: Optional store; without one every search hits the
            provider
        registry: Provider registry, created from config if not given
    """

    config: LookupConfig = field(default_factory=lambda: get_config().lookups)
    cache_store: Optional[CacheStorePort] = None
    registry: InitVar[Optional[LookupRegistry]] = None

    _registry: LookupRegistry = field(init=False, repr=False)
    _cache: Optional[ResultCache] = field(init=False, default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self, registry: Optional[LookupRegistry]) -> None:
        self._logger = logging.getLogger(__name__)
        self._registry = registry if registry is not None else LookupRegistry(config=self.config)
        if self.cache_store is not None:
            self._cache = ResultCache(self.cache_store, self.config.cache_prefix)

    @property
    def lookups(self) -> LookupRegistry:
        """The registry holding this engine's lookup instances."""
        return self._registry

    @property
    def cache(self) -> Optional[ResultCache]:
        """The result cache, or None if no store is configured."""
        return self._cache

    def lookup_for(self, value: Any) -> Optional[LookupName]:
        """Name of the lookup a search for this value would use.

        Returns:
            None for blank input.
        """
        query = classify(value)
        if query is None:
            return None
        return select_lookup(query, self.config.lookup)

    def search(self, value: Any) -> List[Result]:
        """Search for an address, a ``[lat, lon]`` pair or an IP address.

        Args:
            value: The query. Blank input returns an empty list without
                touching any provider or the cache.

        Returns:
            Results as produced by the provider, best match first.

        Raises:
            ConfigurationError: If the configured lookup is not valid.
            CacheError: If the cache store fails.
            geopy.exc.GeopyError: If the provider call fails.
        """
        query = classify(value)
        if query is None:
            return []

        name = select_lookup(query, self.config.lookup)
        lookup = self._registry.get_or_create(name)
        self._logger.debug(
            "Dispatching search",
            extra={"lookup": str(name), "query_kind": query.kind.value},
        )

        if self._cache is None:
            return lookup.search(query)
        return self._cache.fetch_or_compute(query, lambda: lookup.search(query))

    def coordinates(self, value: Any) -> Optional[Coordinates]:
        """Coordinates of the first result, or None if nothing was found."""
        results = self.search(value)
        if results:
            return results[0].coordinates
        return None

    def address(self, value: Any) -> Optional[str]:
        """Address of the first result, or None if nothing was found."""
        results = self.search(value)
        if results:
            return results[0].address
        return None
