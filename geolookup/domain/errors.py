"""Typed domain errors for geolookup.

All errors inherit from GeoLookupError and can optionally wrap a root
cause exception for debugging.

Errors raised by the providers themselves (``geopy.exc.GeopyError`` and
subclasses) are not wrapped: they propagate as-is so that callers can tell
"no results" (an empty list) apart from "lookup failed" (an exception).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass
class GeoLookupError(Exception):
    """Base error for geolookup.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ConfigurationError(GeoLookupError):
    """A requested or configured lookup name is not a valid lookup.

    Attributes:
        lookup: The offending lookup name
        valid_lookups: Every name that would have been accepted
    """

    lookup: str = ""
    valid_lookups: Sequence[str] = field(default_factory=tuple)

    @classmethod
    def invalid_lookup(cls, lookup: object, valid: Sequence[object]) -> ConfigurationError:
        names = [str(name) for name in valid]
        listed = ", ".join(repr(name) for name in names)
        return cls(
            f"Please specify a valid lookup ({lookup!r} is not one of: {listed})",
            lookup=str(lookup),
            valid_lookups=tuple(names),
        )


@dataclass
class CacheError(GeoLookupError):
    """Reading from or writing to the cache store failed.

    Does not mean the provider failed; callers may retry without the cache.

    Attributes:
        key: The cache key involved
        operation: "read", "write", "decode" or "invalidate"
    """

    key: str = ""
    operation: str = ""


@dataclass
class UnsupportedQueryError(GeoLookupError):
    """A lookup was given a query outside its capability group.

    Attributes:
        lookup: Name of the lookup
        query_kind: Kind of the rejected query
    """

    lookup: str = ""
    query_kind: str = ""
