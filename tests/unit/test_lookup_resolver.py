"""Tests for the lookup resolver."""

import pytest

from bevmenu.models.beverage import BeverageRecord, LookupMappings
from bevmenu.models.common import LookupKind, MappingSource
from bevmenu.services.lookup_resolver import LookupResolver, synthetic_label


@pytest.fixture
def resolver(lookup_mappings):
    return LookupResolver(lookup_mappings)


class TestServerMappings:
    """Server-provided names come first."""

    def test_category_from_server(self, resolver):
        assert resolver.get_category_name("recCatLager1") == "Lager"

    def test_type_from_server(self, resolver):
        assert resolver.get_type_name("recTypeRed01") == "Red Wine"

    def test_server_wins_over_static_fallback(self):
        resolver = LookupResolver(LookupMappings(formats={"reckfsdGMlPPVFr4B": "On Tap"}))
        assert resolver.get_format_name("reckfsdGMlPPVFr4B") == "On Tap"

    def test_server_wins_over_pattern(self, resolver):
        """A mapped id keeps its server name even when the beverage name says otherwise."""
        name = resolver.get_category_name("recCatLager1", "Meiomi Pinot Noir Glass")
        assert name == "Lager"


class TestPatternFallback:
    """Category names inferred from beverage names."""

    @pytest.mark.parametrize("beverage_name", [
        "Cabernet Sauvignon Bottle",
        "CABERNET SAUVIGNON BOTTLE",
        "cabernet sauvignon bottle",
    ])
    def test_varietal_independent_of_casing(self, beverage_name):
        resolver = LookupResolver()
        assert resolver.get_category_name("recUnknown0001", beverage_name) == "Cabernet Sauvignon"

    def test_beer_style(self):
        resolver = LookupResolver()
        assert resolver.get_category_name("recUnknown0002", "Lagunitas IPA - Draught") == "IPA"

    def test_type_hint_opens_gate(self):
        """A cocktail name with no gate word still matches when the hint is Cocktails."""
        resolver = LookupResolver()
        name = resolver.get_category_name("recUnknown0003", "House Mojito", type_hint="Cocktails")
        assert name == "Mojito"

    def test_pattern_result_is_cached(self):
        resolver = LookupResolver()
        resolver.get_category_name("recUnknown0004", "Meiomi Pinot Noir Glass")

        assert resolver.get_category_name("recUnknown0004") == "Pinot Noir"
        assert resolver.discovered_categories == {"recUnknown0004": "Pinot Noir"}

    def test_patterns_only_apply_to_categories(self):
        resolver = LookupResolver()
        assert resolver.get_name(LookupKind.TYPE, "recTypeX12345", "Pinot Noir Glass") == "Type X12345"
        found = resolver.lookup(LookupKind.TYPE, "recTypeX12345", "Pinot Noir Glass")
        assert found is None


class TestSyntheticLabels:
    """Ids nothing can resolve."""

    def test_category_label_uses_last_six_chars(self):
        resolver = LookupResolver()
        assert resolver.get_category_name("recUNKNOWNabc123") == "Category abc123"

    def test_unmatched_name_still_synthetic(self):
        resolver = LookupResolver()
        assert resolver.get_category_name("recUNKNOWNabc123", "Mystery Drink") == "Category abc123"

    def test_each_kind_has_its_prefix(self):
        resolver = LookupResolver()
        assert resolver.get_type_name("recZZZtype01") == "Type type01"
        assert resolver.get_format_name("recZZZfmt001") == "Format fmt001"
        assert resolver.get_size_name("recZZZsize01") == "Size size01"

    def test_short_and_missing_ids(self):
        assert synthetic_label(LookupKind.CATEGORY, "abc") == "Category abc"
        assert synthetic_label(LookupKind.CATEGORY, None) == "Category "


class TestStaticFallbacks:
    """Static id tables for formats and sizes."""

    def test_format_fallback(self):
        resolver = LookupResolver()
        assert resolver.lookup(LookupKind.FORMAT, "reckfsdGMlPPVFr4B") == ("Draught", MappingSource.STATIC)

    def test_size_fallback(self):
        resolver = LookupResolver()
        assert resolver.get_size_name("rec1bKYdnFr2uRnpB") == "16 oz"

    def test_no_static_fallback_for_categories(self):
        resolver = LookupResolver()
        assert resolver.get_category_name("reckfsdGMlPPVFr4B") == "Category PVFr4B"
        assert resolver.lookup(LookupKind.CATEGORY, "reckfsdGMlPPVFr4B") is None


class TestResolveRecord:
    """Enriching records with display names."""

    def test_fills_resolved_names(self, resolver):
        beverage = BeverageRecord(
            record_id="recBev1",
            name="Meiomi Pinot Noir - Wine Glass 6 oz Glass",
            type_ids=["recTypeRed01"],
            category_ids=["recCatUnknwn"],
            format_ids=["recDlaYGEmS23x6gB"],
            size_ids=["recSize16oz"],
        )

        resolved = resolver.resolve_record(beverage)

        assert resolved.type_names == ["Red Wine"]
        assert resolved.category_names == ["Pinot Noir"]
        assert resolved.format_names == ["Glass"]
        assert resolved.size_names == ["16 oz"]

    def test_input_record_unchanged(self, resolver):
        beverage = BeverageRecord(record_id="recBev2", name="Stella", type_ids=["recTypeBeer1"])

        resolver.resolve_record(beverage)

        assert beverage.type_names is None

    def test_ids_for_each_kind(self):
        beverage = BeverageRecord(
            record_id="recBev4",
            name="Stella",
            category_ids=["recC"],
            type_ids=["recT"],
            format_ids=["recF"],
            size_ids=["recS"],
        )

        assert [beverage.ids_for(kind) for kind in LookupKind] == [
            beverage.category_ids, beverage.type_ids, beverage.format_ids, beverage.size_ids,
        ]

    def test_synthetic_labels_not_written(self, resolver):
        beverage = BeverageRecord(
            record_id="recBev3",
            name="Mystery Drink",
            type_ids=["recNoSuchType"],
            category_ids=["recNoSuchCat1"],
        )

        resolved = resolver.resolve_record(beverage)

        assert resolved.type_names is None
        assert resolved.category_names is None

    def test_duplicate_names_collapsed(self, resolver):
        beverage = BeverageRecord(
            record_id="recBev4",
            name="Stella",
            type_ids=["recTypeBeer1", "recTypeBeer1"],
        )
        assert resolver.resolve_record(beverage).type_names == ["Beer"]


class TestMappingStats:
    """Server vs. pattern vs. unmapped counts."""

    def test_counts_each_source(self):
        resolver = LookupResolver(LookupMappings(categories={"recCatA": "Lager"}))
        beverages = [
            BeverageRecord(record_id="b1", name="Stella Lager", category_ids=["recCatA"]),
            BeverageRecord(record_id="b2", name="Meiomi Pinot Noir Glass", category_ids=["recCatB"]),
            BeverageRecord(record_id="b3", name="Mystery Drink", category_ids=["recCatC"]),
        ]
        resolver.resolve_records(beverages)

        stats = resolver.mapping_stats(beverages)

        assert stats.total_categories == 3
        assert stats.server_mapped == 1
        assert stats.pattern_mapped == 1
        assert stats.unmapped == 1

    def test_empty(self):
        stats = LookupResolver().mapping_stats()
        assert stats.total_categories == 0
