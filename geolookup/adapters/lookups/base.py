"""Base adapter for lookups backed by a geopy geocoder.

Subclasses build the geopy geocoder and turn each ``geopy.Location`` into
a Result. Free-form addresses go to ``geocode``, coordinates to
``reverse``; geopy errors are left to propagate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from geopy.location import Location
from pydantic import SecretStr

from ...config import LookupConfig, get_config
from ...domain.errors import UnsupportedQueryError
from ...domain.lookups import Lookup
from ...domain.models import Coordinates, Query, QueryKind, Result

STREET_QUERY_KINDS: FrozenSet[QueryKind] = frozenset(
    {QueryKind.FREEFORM_ADDRESS, QueryKind.COORDINATES}
)


def secret_value(secret: Optional[SecretStr]) -> Optional[str]:
    """Unwrap an optional API key."""
    if secret is None:
        return None
    return secret.get_secret_value()


@dataclass
class GeopyLookup:
    """Common search flow for geopy-based lookups.

    Attributes:
        config: Lookup configuration (timeouts, keys, user agent)
    """

    name: ClassVar[Lookup]
    supported_kinds: ClassVar[FrozenSet[QueryKind]] = STREET_QUERY_KINDS

    config: LookupConfig = field(default_factory=lambda: get_config().lookups)

    _geocoder: Any = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._geocoder = self.create_geocoder()
        self._logger.debug(
            "Lookup initialized",
            extra={"lookup": str(self.name), "timeout": self.config.timeout_seconds},
        )

    def create_geocoder(self) -> Any:
        """Build the underlying geopy geocoder."""
        raise NotImplementedError

    def parse_location(self, location: Location) -> Result:
        """Normalize one geopy Location."""
        raise NotImplementedError

    def geocode_options(self) -> Dict[str, Any]:
        """Extra keyword arguments for ``geocode``."""
        return {}

    def reverse_options(self) -> Dict[str, Any]:
        """Extra keyword arguments for ``reverse``."""
        return {}

    def fetch_locations(self, query: Query) -> Optional[List[Location]]:
        """Run the geopy call for an already supported query."""
        if isinstance(query, Coordinates):
            return self._geocoder.reverse(
                query.as_tuple(),
                exactly_one=False,
                timeout=self.config.timeout_seconds,
                **self.reverse_options(),
            )
        return self._geocoder.geocode(
            query.text,
            exactly_one=False,
            timeout=self.config.timeout_seconds,
            **self.geocode_options(),
        )

    def search(self, query: Query) -> List[Result]:
        if query.kind not in self.supported_kinds:
            raise UnsupportedQueryError(
                f"Lookup {self.name} does not support {query.kind.value} queries",
                lookup=str(self.name),
                query_kind=query.kind.value,
            )

        locations = self.fetch_locations(query)
        if not locations:
            self._logger.debug(
                "Lookup returned no result",
                extra={"lookup": str(self.name), "query": query.cache_repr},
            )
            return []

        return [self.parse_location(location) for location in locations]

    def _result(self, location: Location, **fields: Any) -> Result:
        return Result(
            latitude=float(location.latitude),
            longitude=float(location.longitude),
            address=location.address or "",
            provider=str(self.name),
            **fields,
        )
