"""Query classification.

Turns raw caller input into a typed Query. Pure: no network, no
configuration.
"""

from __future__ import annotations

import re
from numbers import Number
from typing import Any, Optional

from ..domain.models import Coordinates, FreeformAddress, IPAddress, Query

# Only the shape of a dotted quad is checked, not octet ranges.
_IP_ADDRESS = re.compile(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}")

_QUERY_TYPES = (IPAddress, Coordinates, FreeformAddress)


def is_ip_address(value: Any) -> bool:
    """Does the value look like four dot-delimited groups of 1-3 digits?"""
    return _IP_ADDRESS.fullmatch(str(value)) is not None


def is_blank(value: Any) -> bool:
    """Is the value empty or whitespace once converted to text?"""
    if value is None:
        return True
    return not str(value).strip()


def _is_coordinate_pair(value: Any) -> bool:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return False
    return all(
        isinstance(item, Number) and not isinstance(item, (bool, complex))
        for item in value
    )


def classify(value: Any) -> Optional[Query]:
    """Classify raw input into a Query.

    Args:
        value: A ``[lat, lon]`` pair, an address or IP string, or an
            already classified Query.

    Returns:
        The Query, or None when the input is blank and nothing should be
        looked up.
    """
    if isinstance(value, _QUERY_TYPES):
        return value
    if _is_coordinate_pair(value):
        return Coordinates(float(value[0]), float(value[1]))
    if is_blank(value):
        return None

    text = str(value)
    if is_ip_address(text):
        return IPAddress(text)
    return FreeformAddress(text)
