"""Services layer - Lookup orchestration.

Available services:
- Geocoder: Public lookup coordinator
- LookupRegistry: Lazily created, memoized lookup instances
- ResultCache: Cache-aside wrapper around lookup calls
- classify: Raw input to typed Query
"""

from .classifier import classify, is_blank, is_ip_address
from .geocoder import Geocoder
from .registry import LookupRegistry, select_lookup
from .result_cache import ResultCache

__all__ = [
    "Geocoder",
    "LookupRegistry",
    "ResultCache",
    "classify",
    "is_blank",
    "is_ip_address",
    "select_lookup",
]
