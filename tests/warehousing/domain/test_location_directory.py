"""Tests for the location directory port, static adapter, and factory."""

import pytest

from warehousing.location import (
    Location,
    get_location_resolver,
    reset_location_resolver,
    set_location_resolver,
)
from warehousing.location.directory import DEFAULT_LOCATIONS, StaticLocationDirectory


class TestStaticLocationDirectory:
    def test_resolves_existing_location(self):
        location = StaticLocationDirectory().resolve_by_identifier("ZWOLLE-001")
        assert location is not None
        assert location.identification == "ZWOLLE-001"
        assert location.max_number_of_warehouses == 1
        assert location.max_capacity == 40

    def test_unknown_identifier_resolves_to_none(self):
        assert StaticLocationDirectory().resolve_by_identifier("NONEXISTENT-001") is None

    def test_none_identifier_resolves_to_none(self):
        assert StaticLocationDirectory().resolve_by_identifier(None) is None

    def test_lists_the_whole_network(self):
        locations = StaticLocationDirectory().all()
        assert len(locations) == len(DEFAULT_LOCATIONS)
        assert {loc.identification for loc in locations} >= {"ZWOLLE-001", "AMSTERDAM-001", "VETSBY-001"}

    def test_custom_locations(self):
        directory = StaticLocationDirectory([Location("Z", 1, 40)])
        assert directory.resolve_by_identifier("Z") == Location("Z", 1, 40)
        assert directory.resolve_by_identifier("ZWOLLE-001") is None

    def test_location_is_immutable(self):
        location = Location("Z", 1, 40)
        with pytest.raises(AttributeError):
            location.max_capacity = 100


class TestLocationResolverFactory:
    def test_defaults_to_static_directory(self):
        reset_location_resolver()
        assert isinstance(get_location_resolver(), StaticLocationDirectory)

    def test_returns_the_same_instance(self):
        reset_location_resolver()
        assert get_location_resolver() is get_location_resolver()

    def test_set_overrides_the_directory(self):
        custom = StaticLocationDirectory([Location("Z", 1, 40)])
        set_location_resolver(custom)
        assert get_location_resolver() is custom

    def test_reset_restores_the_default(self):
        set_location_resolver(StaticLocationDirectory([]))
        reset_location_resolver()
        assert get_location_resolver().resolve_by_identifier("ZWOLLE-001") is not None

    def test_unknown_adapter_is_rejected(self, monkeypatch):
        monkeypatch.setenv("LOCATION_DIRECTORY", "remote")
        reset_location_resolver()
        with pytest.raises(ValueError, match="Unknown location directory"):
            get_location_resolver()
