"""Google Maps geocoding lookup (geopy GoogleV3)."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from geopy.geocoders import GoogleV3
from geopy.location import Location

from ...domain.lookups import Lookup
from ...domain.models import Result
from .base import GeopyLookup, secret_value


def _component(
    components: Iterable[Dict[str, Any]], *types: str, short: bool = False
) -> Optional[str]:
    """First address component matching any of the given types."""
    for wanted in types:
        for component in components:
            if wanted in (component.get("types") or ()):
                return component.get("short_name" if short else "long_name")
    return None


class GoogleLookup(GeopyLookup):
    """Street lookup against the Google Geocoding API."""

    name = Lookup.GOOGLE

    def create_geocoder(self) -> GoogleV3:
        return GoogleV3(
            api_key=secret_value(self.config.google_api_key),
            timeout=self.config.timeout_seconds,
            user_agent=self.config.user_agent,
        )

    def geocode_options(self) -> Dict[str, Any]:
        return {"language": self.config.language}

    def reverse_options(self) -> Dict[str, Any]:
        return {"language": self.config.language}

    def parse_location(self, location: Location) -> Result:
        components = location.raw.get("address_components") or []
        return self._result(
            location,
            city=_component(components, "locality", "postal_town", "sublocality") or "",
            country=_component(components, "country") or "",
            country_code=(_component(components, "country", short=True) or "").upper(),
            state=_component(components, "administrative_area_level_1"),
            postal_code=_component(components, "postal_code"),
        )
