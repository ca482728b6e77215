"""Provider registry - one lazily created lookup instance per name.

Lookups are constructed on first use and then reused for the lifetime of
the registry. Construction goes through a lock so concurrent first calls
for the same name build exactly one instance.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from ..adapters.lookups import LOOKUP_FACTORIES, LookupFactory
from ..config import LookupConfig, get_config
from ..domain.errors import ConfigurationError
from ..domain.lookups import IP_LOOKUPS, STREET_LOOKUPS, VALID_LOOKUPS, Lookup
from ..domain.models import IPAddress, Query
from ..ports.lookup import LookupPort

LookupName = Union[Lookup, str]

logger = logging.getLogger(__name__)


def select_lookup(query: Query, configured: Optional[LookupName] = None) -> LookupName:
    """Pick the lookup name for a query.

    IP addresses always go to the default IP lookup. Everything else goes
    to the configured street lookup, or the default street lookup when
    none is configured. The name is not validated here.
    """
    if isinstance(query, IPAddress):
        return IP_LOOKUPS[0]
    return configured or STREET_LOOKUPS[0]


def to_lookup(name: LookupName) -> Lookup:
    """Convert a name to a Lookup.

    Raises:
        ConfigurationError: If the name is not a valid lookup.
    """
    if isinstance(name, Lookup):
        return name
    try:
        return Lookup(name)
    except ValueError:
        raise ConfigurationError.invalid_lookup(name, VALID_LOOKUPS) from None


@dataclass
class LookupRegistry:
    """Memoized lookup instances keyed by name.

    Usage:
        registry = LookupRegistry(config.lookups)
        google = registry.get_or_create("google")
        assert registry.get_or_create(Lookup.GOOGLE) is google

    Attributes:
        config: Passed to each lookup factory
        factories: Constructor for every valid lookup name
    """

    config: LookupConfig = field(default_factory=lambda: get_config().lookups)
    factories: Dict[Lookup, LookupFactory] = field(
        default_factory=lambda: dict(LOOKUP_FACTORIES)
    )

    _instances: Dict[Lookup, LookupPort] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def get_or_create(self, name: LookupName) -> LookupPort:
        """Return the lookup for a name, creating it on first use.

        Raises:
            ConfigurationError: If the name is not a valid lookup. The
                registry is left unchanged.
        """
        lookup = to_lookup(name)
        with self._lock:
            instance = self._instances.get(lookup)
            if instance is None:
                logger.debug("Creating lookup", extra={"lookup": lookup.value})
                instance = self.factories[lookup](self.config)
                self._instances[lookup] = instance
            return instance

    def register(self, name: LookupName, factory: LookupFactory) -> None:
        """Replace the constructor for a lookup name.

        Any instance already created for that name is dropped.
        """
        lookup = to_lookup(name)
        with self._lock:
            self.factories[lookup] = factory
            self._instances.pop(lookup, None)

    def reset(self) -> None:
        """Drop every created instance."""
        with self._lock:
            self._instances.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return any(lookup.value == str(name) for lookup in self._instances)

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)
