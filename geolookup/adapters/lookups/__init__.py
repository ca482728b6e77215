"""Lookup adapters - Implementations of LookupPort.

LOOKUP_FACTORIES maps every valid lookup name to the class that serves it.
The provider registry only ever constructs lookups through this table.
"""

from __future__ import annotations

from typing import Callable, Dict

from ...config import LookupConfig
from ...domain.lookups import Lookup
from ...ports.lookup import LookupPort
from .base import GeopyLookup
from .bing import BingLookup
from .freegeoip import FreeGeoIP, FreeGeoIPLookup
from .google import GoogleLookup
from .nominatim import NominatimLookup
from .yandex import YandexLookup

LookupFactory = Callable[[LookupConfig], LookupPort]

LOOKUP_FACTORIES: Dict[Lookup, LookupFactory] = {
    Lookup.GOOGLE: GoogleLookup,
    Lookup.BING: BingLookup,
    Lookup.YANDEX: YandexLookup,
    Lookup.NOMINATIM: NominatimLookup,
    Lookup.FREEGEOIP: FreeGeoIPLookup,
}

__all__ = [
    "LOOKUP_FACTORIES",
    "LookupFactory",
    "GeopyLookup",
    "GoogleLookup",
    "BingLookup",
    "YandexLookup",
    "NominatimLookup",
    "FreeGeoIP",
    "FreeGeoIPLookup",
]
