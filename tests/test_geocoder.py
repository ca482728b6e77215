"""Tests for the Geocoder lookup coordinator."""

from unittest.mock import MagicMock

import pytest
from geopy.exc import GeocoderServiceError

from geolookup.adapters.cache import InMemoryCache
from geolookup.config import LookupConfig
from geolookup.domain.errors import CacheError, ConfigurationError
from geolookup.domain.lookups import IP_LOOKUPS, STREET_LOOKUPS, Lookup
from geolookup.domain.models import Coordinates, FreeformAddress, IPAddress
from geolookup.services.geocoder import Geocoder
from geolookup.services.registry import LookupRegistry

from .fakes import MOUNTAIN_VIEW, PARIS


@pytest.fixture
def geocoder(lookup_config, fake_registry):
    return Geocoder(config=lookup_config, registry=fake_registry)


@pytest.fixture
def cached_geocoder(lookup_config, fake_registry, memory_store):
    return Geocoder(config=lookup_config, cache_store=memory_store, registry=fake_registry)


class TestBlankQueries:
    @pytest.mark.parametrize("value", ["", "  ", "\t\n"])
    def test_blank_returns_empty_without_lookup(self, lookup_config, value):
        registry = MagicMock(spec=LookupRegistry)
        store = MagicMock()
        geocoder = Geocoder(config=lookup_config, cache_store=store, registry=registry)

        assert geocoder.search(value) == []
        registry.get_or_create.assert_not_called()
        store.get.assert_not_called()
        store.set.assert_not_called()

    def test_blank_coordinates_and_address_are_none(self, geocoder):
        assert geocoder.coordinates("") is None
        assert geocoder.address("  ") is None

    def test_lookup_for_blank_is_none(self, geocoder):
        assert geocoder.lookup_for(" ") is None


class TestRouting:
    def test_out_of_range_ip_routes_to_ip_lookup(self, geocoder, fake_lookups):
        results = geocoder.search("256.256.256.256")

        assert results == [MOUNTAIN_VIEW]
        fake_lookups[IP_LOOKUPS[0]].search.assert_called_once_with(
            IPAddress("256.256.256.256")
        )
        fake_lookups[STREET_LOOKUPS[0]].search.assert_not_called()

    def test_coordinates_route_to_street_lookup(self, geocoder, fake_lookups):
        geocoder.search([40.7128, -74.0060])

        fake_lookups[STREET_LOOKUPS[0]].search.assert_called_once_with(
            Coordinates(40.7128, -74.006)
        )
        fake_lookups[Lookup.FREEGEOIP].search.assert_not_called()

    def test_address_routes_to_street_lookup(self, geocoder, fake_lookups):
        geocoder.search("Paris")

        fake_lookups[STREET_LOOKUPS[0]].search.assert_called_once_with(
            FreeformAddress("Paris")
        )

    def test_configured_street_lookup_is_used(self, fake_registry, fake_lookups):
        geocoder = Geocoder(config=LookupConfig(lookup="bing"), registry=fake_registry)

        geocoder.search("Paris")
        geocoder.search("8.8.8.8")

        fake_lookups[Lookup.BING].search.assert_called_once_with(FreeformAddress("Paris"))
        fake_lookups[Lookup.FREEGEOIP].search.assert_called_once_with(IPAddress("8.8.8.8"))
        fake_lookups[STREET_LOOKUPS[0]].search.assert_not_called()

    def test_invalid_configured_lookup_raises(self, fake_registry):
        geocoder = Geocoder(config=LookupConfig(lookup="mapquest"), registry=fake_registry)

        with pytest.raises(ConfigurationError) as excinfo:
            geocoder.search("Paris")

        assert excinfo.value.lookup == "mapquest"
        assert len(fake_registry) == 0

    def test_invalid_configured_lookup_does_not_affect_ip(self, fake_registry):
        geocoder = Geocoder(config=LookupConfig(lookup="mapquest"), registry=fake_registry)

        assert geocoder.search("8.8.8.8") == [MOUNTAIN_VIEW]

    def test_lookup_for_reports_routing(self, geocoder):
        assert geocoder.lookup_for("1.2.3.4") is Lookup.FREEGEOIP
        assert geocoder.lookup_for([1, 2]) is STREET_LOOKUPS[0]

    def test_injected_registry_is_used(self, geocoder, fake_registry):
        assert geocoder.lookups is fake_registry

    def test_default_registry_is_built_from_config(self, lookup_config):
        geocoder = Geocoder(config=lookup_config)

        assert isinstance(geocoder.lookups, LookupRegistry)
        assert geocoder.lookups.config is lookup_config
        assert len(geocoder.lookups) == 0

    def test_lookup_instance_is_reused(self, geocoder, fake_registry):
        geocoder.search("Paris")
        geocoder.search("Lyon")
        geocoder.search([1.0, 2.0])

        assert len(fake_registry) == 1


class TestCaching:
    def test_without_cache_every_search_hits_provider(self, geocoder, fake_lookups):
        geocoder.search("Paris")
        geocoder.search("Paris")

        assert geocoder.cache is None
        assert fake_lookups[STREET_LOOKUPS[0]].search.call_count == 2

    def test_with_cache_second_search_is_a_hit(self, cached_geocoder, fake_lookups):
        first = cached_geocoder.search("Paris")
        second = cached_geocoder.search("Paris")

        assert first == second == [PARIS]
        assert fake_lookups[STREET_LOOKUPS[0]].search.call_count == 1

    def test_cache_uses_configured_prefix(self, cached_geocoder, memory_store):
        cached_geocoder.search("8.8.8.8")

        assert memory_store.keys() == ["test:ip_address:8.8.8.8"]

    def test_single_slot_store_keeps_latest_query(self, lookup_config, fake_registry, fake_lookups):
        store = InMemoryCache(max_size=1)
        geocoder = Geocoder(config=lookup_config, cache_store=store, registry=fake_registry)

        assert geocoder.search("Paris") == [PARIS]
        assert geocoder.search("Lyon") == [PARIS]
        assert geocoder.search("Lyon") == [PARIS]

        assert store.keys() == ["test:freeform_address:Lyon"]
        assert fake_lookups[STREET_LOOKUPS[0]].search.call_count == 2

    def test_cache_failure_is_not_an_empty_result(self, lookup_config, fake_registry):
        store = MagicMock()
        store.get.side_effect = ConnectionError("down")
        geocoder = Geocoder(config=lookup_config, cache_store=store, registry=fake_registry)

        with pytest.raises(CacheError):
            geocoder.search("Paris")


class TestProviderErrors:
    def test_provider_errors_propagate(self, geocoder, fake_lookups):
        fake_lookups[STREET_LOOKUPS[0]].search.side_effect = GeocoderServiceError("503")

        with pytest.raises(GeocoderServiceError):
            geocoder.search("Paris")

    def test_provider_errors_are_not_cached(self, cached_geocoder, fake_lookups, memory_store):
        fake_lookups[STREET_LOOKUPS[0]].search.side_effect = GeocoderServiceError("503")

        with pytest.raises(GeocoderServiceError):
            cached_geocoder.search("Paris")
        assert memory_store.size() == 0


class TestDerivedLookups:
    def test_coordinates_of_first_result(self, geocoder):
        assert geocoder.coordinates("some address") == Coordinates(48.8566, 2.3522)

    def test_coordinates_none_when_nothing_found(self, geocoder, fake_lookups):
        fake_lookups[STREET_LOOKUPS[0]].search.return_value = []

        assert geocoder.coordinates("some address") is None

    def test_address_of_first_result(self, geocoder):
        assert geocoder.address([48.8566, 2.3522]) == PARIS.address
        assert geocoder.address("8.8.8.8") == MOUNTAIN_VIEW.address

    def test_address_none_when_nothing_found(self, geocoder, fake_lookups):
        fake_lookups[STREET_LOOKUPS[0]].search.return_value = []

        assert geocoder.address([0, 0]) is None

    def test_derived_lookups_go_through_search(self, geocoder, monkeypatch):
        search = MagicMock(return_value=[PARIS])
        monkeypatch.setattr(geocoder, "search", search)

        geocoder.coordinates("Paris")
        geocoder.address("Paris")

        assert search.call_count == 2
