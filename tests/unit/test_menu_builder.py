"""Tests for the end-to-end menu pipeline."""

import pytest

from bevmenu.errors import SourceDataError
from bevmenu.services.menu_builder import MenuBuilder, MenuSnapshotStore, build_menu


class TestBuildMenu:
    """Raw payloads to a rendered menu."""

    def test_cider_group_at_location(self, beverages_payload, lookup_tables, locations_payload):
        built = build_menu(beverages_payload, lookup_tables, locations_payload, location="recLoc3")

        cider = built.menu.get_group("on-tap", "cider")
        assert [b.name for b in cider.beverages] == [
            "Second Cider - Draught 16 oz Glass",
            "Test Cider - Draught 16 oz Glass",
        ]
        assert built.location.display_name == "Lakeside - Patio"
        assert built.menu.location_number == 3

    def test_names_resolved(self, beverages_payload, lookup_tables, locations_payload):
        built = build_menu(beverages_payload, lookup_tables, locations_payload, location="recLoc3")

        lager = built.menu.get_group("on-tap", "ales-lagers-stouts").beverages[0]
        assert lager.type_names == ["Beer"]
        assert lager.category_names == ["Lager"]
        assert lager.format_names == ["Draught"]

    def test_location_by_number_and_slug(self, beverages_payload, lookup_tables, locations_payload):
        by_number = build_menu(beverages_payload, lookup_tables, locations_payload, location="5")
        by_slug = build_menu(beverages_payload, lookup_tables, locations_payload, location="airport")

        assert by_number.location.location_id == "recLoc5"
        assert by_slug.location.location_id == "recLoc5"
        # The lager is unavailable at recLoc5
        assert by_number.menu.get_group("on-tap", "draught-beer") is None

    def test_location_filter_uses_location_id(self, beverages_payload, lookup_tables, locations_payload):
        built = build_menu(beverages_payload, lookup_tables, locations_payload, location="recLoc1")

        cider = built.menu.get_group("on-tap", "cider")
        assert [b.record_id for b in cider.beverages] == ["recRawCiderA"]

    def test_only_available(self, beverages_payload, lookup_tables, locations_payload):
        built = build_menu(
            beverages_payload, lookup_tables, locations_payload, location="recLoc3", only_available=True
        )
        assert built.menu.get_group("on-tap", "ales-lagers-stouts") is None

    def test_without_locations(self, beverages_payload, lookup_tables):
        built = build_menu(beverages_payload, lookup_tables)

        assert built.location is None
        group_ids = [g.group_id for g in built.menu.get_section("on-tap").groups]
        assert "ales-lagers-stouts" in group_ids
        assert "draught-beer" in group_ids

    def test_location_without_location_records(self, beverages_payload, lookup_tables):
        built = build_menu(beverages_payload, lookup_tables, None, location="recLoc1")

        assert built.location is None
        cider = built.menu.get_group("on-tap", "cider")
        assert [b.record_id for b in cider.beverages] == ["recRawCiderA"]

    def test_location_number_without_location_records(self, beverages_payload, lookup_tables):
        built = build_menu(beverages_payload, lookup_tables, None, location="3")

        assert built.menu.location_number == 3
        assert built.menu.get_group("on-tap", "ales-lagers-stouts") is not None
        assert built.menu.get_group("on-tap", "draught-beer") is None

    def test_accessors(self, beverages_payload, lookup_tables):
        accessors = build_menu(beverages_payload, lookup_tables).accessors

        assert accessors.get_type_name("recTypeCider") == "Cider & RTD"
        assert accessors.get_format_name("reckfsdGMlPPVFr4B") == "Draught"
        assert accessors.get_size_name("recSize16oz") == "16 oz"
        assert accessors.get_category_name("recNoSuch123456") == "Category 123456"

    def test_malformed_payload_raises(self):
        with pytest.raises(SourceDataError):
            build_menu("garbage")

    def test_empty_payloads(self):
        built = build_menu(None)
        assert built.menu.section_ids == ["on-tap"]


class TestSnapshotStore:
    """Last-known-good data."""

    def test_starts_empty(self):
        assert MenuSnapshotStore().current.is_empty

    def test_refresh_replaces_snapshot(self, beverages_payload, lookup_tables, locations_payload):
        store = MenuSnapshotStore()

        snapshot = store.refresh(beverages_payload, lookup_tables, locations_payload)

        assert len(snapshot.beverages) == 3
        assert store.current is snapshot
        assert snapshot.loaded_at is not None

    def test_failed_refresh_keeps_last_good(self, beverages_payload, lookup_tables):
        store = MenuSnapshotStore()
        good = store.refresh(beverages_payload, lookup_tables)

        result = store.refresh("garbage")

        assert result is good
        assert store.current is good

    def test_failed_first_refresh_is_empty(self):
        store = MenuSnapshotStore()
        assert store.refresh({"unexpected": True}).is_empty

    def test_refresh_with_malformed_lookup_table(self, beverages_payload, lookup_tables):
        store = MenuSnapshotStore()
        store.refresh(beverages_payload, lookup_tables)

        snapshot = store.refresh(beverages_payload, {**lookup_tables, "categories": 5})

        assert store.current is snapshot
        assert snapshot.mappings.categories == {}
        assert snapshot.mappings.types["recTypeCider"] == "Cider & RTD"

    def test_build_from_store(self, beverages_payload, lookup_tables, locations_payload):
        store = MenuSnapshotStore()
        store.refresh(beverages_payload, lookup_tables, locations_payload)

        built = MenuBuilder().build(store.current, location="lakeside-patio")

        assert built.location.location_id == "recLoc3"
        assert built.menu.get_group("on-tap", "cider") is not None
