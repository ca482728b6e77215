"""Domain layer - Core models, lookup names and errors.

This module contains immutable domain models and typed errors
used throughout the library. No external dependencies.
"""

from .errors import (
    CacheError,
    ConfigurationError,
    GeoLookupError,
    UnsupportedQueryError,
)
from .lookups import (
    IP_LOOKUPS,
    STREET_LOOKUPS,
    VALID_LOOKUPS,
    Lookup,
    ip_lookups,
    street_lookups,
    valid_lookups,
)
from .models import (
    Coordinates,
    FreeformAddress,
    IPAddress,
    Query,
    QueryKind,
    Result,
)

__all__ = [
    # Models
    "Query",
    "QueryKind",
    "IPAddress",
    "Coordinates",
    "FreeformAddress",
    "Result",
    # Lookups
    "Lookup",
    "STREET_LOOKUPS",
    "IP_LOOKUPS",
    "VALID_LOOKUPS",
    "street_lookups",
    "ip_lookups",
    "valid_lookups",
    # Errors
    "GeoLookupError",
    "ConfigurationError",
    "CacheError",
    "UnsupportedQueryError",
]
