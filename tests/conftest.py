"""Shared fixtures: isolated configuration and fake lookups."""

from __future__ import annotations

import pytest

from geolookup.adapters.cache import InMemoryCache
from geolookup.config import LookupConfig, reset_config
from geolookup.container import reset_geocoder
from geolookup.domain.lookups import VALID_LOOKUPS, Lookup
from geolookup.services.registry import LookupRegistry

from .fakes import MOUNTAIN_VIEW, PARIS, make_fake_lookup


@pytest.fixture(autouse=True)
def isolated_defaults():
    """Drop cached configuration and the default geocoder around each test."""
    reset_config()
    reset_geocoder()
    yield
    reset_config()
    reset_geocoder()


@pytest.fixture
def lookup_config() -> LookupConfig:
    return LookupConfig(lookup=None, cache_prefix="test:", user_agent="geolookup-tests")


@pytest.fixture
def fake_lookups() -> dict:
    """One fake lookup per valid name, street lookups answer with PARIS."""
    fakes = {name: make_fake_lookup(name, [PARIS]) for name in VALID_LOOKUPS}
    fakes[Lookup.FREEGEOIP].search.return_value = [MOUNTAIN_VIEW]
    return fakes


@pytest.fixture
def fake_registry(lookup_config, fake_lookups) -> LookupRegistry:
    """Registry whose factories hand out the fake lookups."""
    factories = {name: (lambda config, _f=fake: _f) for name, fake in fake_lookups.items()}
    return LookupRegistry(config=lookup_config, factories=factories)


@pytest.fixture
def memory_store() -> InMemoryCache:
    return InMemoryCache(name="test")
