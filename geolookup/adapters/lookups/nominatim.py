"""Nominatim (OpenStreetMap) lookup."""

from __future__ import annotations

from typing import Any, Dict

from geopy.geocoders import Nominatim
from geopy.location import Location

from ...domain.lookups import Lookup
from ...domain.models import Result
from .base import GeopyLookup


class NominatimLookup(GeopyLookup):
    """Street lookup against a Nominatim server.

    Nominatim's usage policy requires a meaningful user agent, taken from
    ``GEOLOOKUP_USER_AGENT``.
    """

    name = Lookup.NOMINATIM

    def create_geocoder(self) -> Nominatim:
        return Nominatim(
            domain=self.config.nominatim_domain,
            user_agent=self.config.user_agent,
            timeout=self.config.timeout_seconds,
        )

    def geocode_options(self) -> Dict[str, Any]:
        return {"addressdetails": True, "language": self.config.language or False}

    def reverse_options(self) -> Dict[str, Any]:
        return {"addressdetails": True, "language": self.config.language or False}

    def parse_location(self, location: Location) -> Result:
        address = location.raw.get("address") or {}
        city = (
            address.get("city")
            or address.get("municipality")
            or address.get("town")
            or address.get("village")
            or ""
        )
        return self._result(
            location,
            city=city,
            country=address.get("country") or "",
            country_code=(address.get("country_code") or "").upper(),
            state=address.get("state") or address.get("region"),
            postal_code=address.get("postcode"),
        )
