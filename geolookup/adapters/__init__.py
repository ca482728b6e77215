"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the lookup engine to external systems:
- Geocoding providers (Google, Bing, Yandex, Nominatim, FreeGeoIP via geopy)
- Cache stores (in-memory)
"""
