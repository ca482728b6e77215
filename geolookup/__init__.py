"""geolookup - resolve addresses, coordinates and IP addresses to locations.

Quick use goes through a default geocoder built from ``GEOLOOKUP_*``
environment variables:

    import geolookup

    geolookup.search("1600 Pennsylvania Ave NW, Washington DC")
    geolookup.coordinates("8.8.8.8")
    geolookup.address([40.7128, -74.0060])

Applications that manage their own lifecycle build a Geocoder directly
(see geolookup.services.Geocoder and geolookup.container.create_geocoder).
"""

from __future__ import annotations

from typing import Any, List, Optional

from .container import create_geocoder, get_geocoder, reset_geocoder, set_geocoder
from .domain import (
    IP_LOOKUPS,
    STREET_LOOKUPS,
    VALID_LOOKUPS,
    CacheError,
    ConfigurationError,
    Coordinates,
    FreeformAddress,
    GeoLookupError,
    IPAddress,
    Lookup,
    Result,
    UnsupportedQueryError,
    ip_lookups,
    street_lookups,
    valid_lookups,
)
from .observability import configure_logging
from .services import Geocoder, classify

__version__ = "0.1.0"


def search(query: Any) -> List[Result]:
    """Search for an address, a ``[lat, lon]`` pair or an IP address."""
    return get_geocoder().search(query)


def coordinates(query: Any) -> Optional[Coordinates]:
    """Look up the coordinates of a street or IP address."""
    return get_geocoder().coordinates(query)


def address(query: Any) -> Optional[str]:
    """Look up the address of ``[lat, lon]`` coordinates or an IP address."""
    return get_geocoder().address(query)


__all__ = [
    "__version__",
    "search",
    "coordinates",
    "address",
    "classify",
    "Geocoder",
    "create_geocoder",
    "get_geocoder",
    "set_geocoder",
    "reset_geocoder",
    "configure_logging",
    "Result",
    "Coordinates",
    "IPAddress",
    "FreeformAddress",
    "Lookup",
    "STREET_LOOKUPS",
    "IP_LOOKUPS",
    "VALID_LOOKUPS",
    "street_lookups",
    "ip_lookups",
    "valid_lookups",
    "GeoLookupError",
    "ConfigurationError",
    "CacheError",
    "UnsupportedQueryError",
]
