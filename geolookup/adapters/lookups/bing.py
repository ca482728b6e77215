"""Bing Maps locations lookup (geopy Bing)."""

from __future__ import annotations

from typing import Any, Dict

from geopy.geocoders import Bing
from geopy.location import Location

from ...domain.lookups import Lookup
from ...domain.models import Result
from .base import GeopyLookup, secret_value


class BingLookup(GeopyLookup):
    """Street lookup against the Bing Maps Locations API."""

    name = Lookup.BING

    def create_geocoder(self) -> Bing:
        return Bing(
            api_key=secret_value(self.config.bing_api_key) or "",
            timeout=self.config.timeout_seconds,
            user_agent=self.config.user_agent,
        )

    def geocode_options(self) -> Dict[str, Any]:
        return {"culture": self.config.language, "include_country_code": True}

    def reverse_options(self) -> Dict[str, Any]:
        return {"culture": self.config.language, "include_country_code": True}

    def parse_location(self, location: Location) -> Result:
        address = location.raw.get("address") or {}
        return self._result(
            location,
            city=address.get("locality") or "",
            country=address.get("countryRegion") or "",
            country_code=(address.get("countryRegionIso2") or "").upper(),
            state=address.get("adminDistrict"),
            postal_code=address.get("postalCode"),
        )
