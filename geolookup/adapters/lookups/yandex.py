"""Yandex geocoder lookup (geopy Yandex)."""

from __future__ import annotations

from typing import Any, Dict, Optional

from geopy.geocoders import Yandex
from geopy.location import Location

from ...domain.lookups import Lookup
from ...domain.models import Result
from .base import GeopyLookup, secret_value


class YandexLookup(GeopyLookup):
    """Street lookup against the Yandex Geocoder API."""

    name = Lookup.YANDEX

    def create_geocoder(self) -> Yandex:
        return Yandex(
            api_key=secret_value(self.config.yandex_api_key) or "",
            timeout=self.config.timeout_seconds,
            user_agent=self.config.user_agent,
        )

    def geocode_options(self) -> Dict[str, Any]:
        return {"lang": self.config.language}

    def reverse_options(self) -> Dict[str, Any]:
        return {"lang": self.config.language}

    def parse_location(self, location: Location) -> Result:
        address: Dict[str, Any] = location.raw
        for section in ("metaDataProperty", "GeocoderMetaData", "Address"):
            address = address.get(section) or {}
        by_kind: Dict[str, Optional[str]] = {}
        for component in address.get("Components") or []:
            by_kind.setdefault(component.get("kind") or "", component.get("name"))

        return self._result(
            location,
            city=by_kind.get("locality") or "",
            country=by_kind.get("country") or "",
            country_code=(address.get("country_code") or "").upper(),
            state=by_kind.get("province"),
            postal_code=address.get("postal_code"),
        )
