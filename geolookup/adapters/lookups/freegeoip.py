"""FreeGeoIP lookup: IP address geolocation.

geopy ships no IP geocoder, so FreeGeoIP follows geopy's own geocoder
layout (a ``Geocoder`` subclass using ``_call_geocoder``) to get the same
adapters, timeouts and error mapping as the street lookups.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from geopy.geocoders.base import DEFAULT_SENTINEL, Geocoder
from geopy.location import Location

from ...domain.lookups import Lookup
from ...domain.models import Query, QueryKind, Result
from .base import GeopyLookup

logger = logging.getLogger(__name__)


class FreeGeoIP(Geocoder):
    """Geocoder for freegeoip-compatible ``/json/<ip>`` services."""

    api_path = "/json/%(ip)s"

    def __init__(
        self,
        *,
        domain: str = "freegeoip.app",
        scheme: Optional[str] = None,
        timeout: Any = DEFAULT_SENTINEL,
        proxies: Any = DEFAULT_SENTINEL,
        user_agent: Optional[str] = None,
        ssl_context: Any = DEFAULT_SENTINEL,
        adapter_factory: Any = None,
    ) -> None:
        super().__init__(
            scheme=scheme,
            timeout=timeout,
            proxies=proxies,
            user_agent=user_agent,
            ssl_context=ssl_context,
            adapter_factory=adapter_factory,
        )
        self.domain = domain.strip("/")
        self.api = "%s://%s%s" % (self.scheme, self.domain, self.api_path)

    def geocode(self, query: str, *, timeout: Any = DEFAULT_SENTINEL) -> Optional[Location]:
        """Locate an IP address; None for unknown or reserved addresses."""
        url = self.api % {"ip": quote(query.strip(), safe="")}
        logger.debug("%s.geocode: %s", type(self).__name__, url)
        return self._call_geocoder(url, self._parse_json, timeout=timeout)

    def _parse_json(self, doc: Optional[Dict[str, Any]]) -> Optional[Location]:
        if not doc:
            return None
        latitude = doc.get("latitude")
        longitude = doc.get("longitude")
        if latitude is None or longitude is None:
            return None
        # Reserved and private ranges come back at 0,0 with no country.
        if float(latitude) == 0 and float(longitude) == 0 and not doc.get("country_code"):
            return None

        region = " ".join(
            part for part in (doc.get("region_code"), doc.get("zip_code")) if part
        )
        address = ", ".join(
            part for part in (doc.get("city"), region, doc.get("country_name")) if part
        )
        return Location(address, (float(latitude), float(longitude)), doc)


class FreeGeoIPLookup(GeopyLookup):
    """IP lookup against a freegeoip-compatible service."""

    name = Lookup.FREEGEOIP
    supported_kinds = frozenset({QueryKind.IP_ADDRESS})

    def create_geocoder(self) -> FreeGeoIP:
        return FreeGeoIP(
            domain=self.config.freegeoip_domain,
            timeout=self.config.timeout_seconds,
            user_agent=self.config.user_agent,
        )

    def fetch_locations(self, query: Query) -> List[Location]:
        location = self._geocoder.geocode(query.text, timeout=self.config.timeout_seconds)
        return [location] if location is not None else []

    def parse_location(self, location: Location) -> Result:
        raw = location.raw
        return self._result(
            location,
            city=raw.get("city") or "",
            country=raw.get("country_name") or "",
            country_code=(raw.get("country_code") or "").upper(),
            state=raw.get("region_name") or None,
            postal_code=raw.get("zip_code") or None,
        )
