"""The fixed set of lookup names, split into capability groups."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Lookup(str, Enum):
    """A named remote geocoding service."""

    NOMINATIM = "nominatim"
    GOOGLE = "google"
    BING = "bing"
    YANDEX = "yandex"
    FREEGEOIP = "freegeoip"

    def __str__(self) -> str:
        return self.value


# Default first.
STREET_LOOKUPS: Tuple[Lookup, ...] = (
    Lookup.NOMINATIM,
    Lookup.GOOGLE,
    Lookup.BING,
    Lookup.YANDEX,
)

# Default first.
IP_LOOKUPS: Tuple[Lookup, ...] = (Lookup.FREEGEOIP,)

VALID_LOOKUPS: Tuple[Lookup, ...] = STREET_LOOKUPS + IP_LOOKUPS


def street_lookups() -> list[Lookup]:
    """All street address lookups, default first."""
    return list(STREET_LOOKUPS)


def ip_lookups() -> list[Lookup]:
    """All IP address lookups, default first."""
    return list(IP_LOOKUPS)


def valid_lookups() -> list[Lookup]:
    """All valid lookup names."""
    return list(VALID_LOOKUPS)
