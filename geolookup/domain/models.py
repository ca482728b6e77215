"""Immutable domain models for geolookup.

All models are frozen dataclasses with slots. Queries form a tagged union
(IPAddress, Coordinates, FreeformAddress); Result is the normalized record
every lookup returns.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class QueryKind(str, Enum):
    """Shape of a classified query."""

    IP_ADDRESS = "ip_address"
    COORDINATES = "coordinates"
    FREEFORM_ADDRESS = "freeform_address"


@dataclass(frozen=True, slots=True)
class IPAddress:
    """A query that looks like a dotted-quad IP address.

    The check is purely syntactic, ``999.999.999.999`` is still an IPAddress.
    """

    text: str

    @property
    def kind(self) -> QueryKind:
        return QueryKind.IP_ADDRESS

    @property
    def cache_repr(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Coordinates:
    """A latitude/longitude pair.

    Used both as a reverse-geocoding query and as the coordinates of a Result.
    """

    latitude: float
    longitude: float

    @property
    def kind(self) -> QueryKind:
        return QueryKind.COORDINATES

    @property
    def cache_repr(self) -> str:
        return f"{self.latitude!r},{self.longitude!r}"

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class FreeformAddress:
    """Any non-blank text that is not an IP address."""

    text: str

    @property
    def kind(self) -> QueryKind:
        return QueryKind.FREEFORM_ADDRESS

    @property
    def cache_repr(self) -> str:
        return self.text


Query = Union[IPAddress, Coordinates, FreeformAddress]


@dataclass(frozen=True, slots=True)
class Result:
    """A normalized geocoding result.

    Attributes:
        latitude: Latitude of the match
        longitude: Longitude of the match
        address: Full formatted address
        city: City, town or village name
        country: Country name
        country_code: ISO 3166-1 alpha-2 code, upper case
        state: State, region or other first-level subdivision
        postal_code: Postal code if the provider returns one
        provider: Name of the lookup that produced this result
    """

    latitude: float
    longitude: float
    address: str = ""
    city: str = ""
    country: str = ""
    country_code: str = ""
    state: Optional[str] = None
    postal_code: Optional[str] = None
    provider: str = ""

    @property
    def coordinates(self) -> Coordinates:
        """Return the result location as Coordinates."""
        return Coordinates(self.latitude, self.longitude)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Result:
        """Build a Result from a dict produced by to_dict()."""
        return cls(
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            address=data.get("address", ""),
            city=data.get("city", ""),
            country=data.get("country", ""),
            country_code=data.get("country_code", ""),
            state=data.get("state"),
            postal_code=data.get("postal_code"),
            provider=data.get("provider", ""),
        )
