"""Tests for stats service."""

import pytest

from bevmenu.models.menu import Menu
from bevmenu.services.grouping_engine import organize_by_hierarchy
from bevmenu.services.stats_service import StatsService


@pytest.fixture
def stats_service():
    return StatsService(valid_value="✅ Valid")


@pytest.fixture
def wine_menu(make_beverage):
    beverages = [
        make_beverage("Meiomi Pinot Noir - Wine Glass 6 oz Glass", price=12,
                      type_names=["Red Wine"], category_ids=["recPN"]),
        make_beverage("Meiomi Pinot Noir - Wine Bottle 25.4 oz Bottle", price=44,
                      type_names=["Red Wine"], category_ids=["recPN"]),
        make_beverage("Josh Merlot - Wine Glass 6 oz Glass", price=10,
                      type_names=["Red Wine"], category_ids=["recMer"], availability="❌ Invalid"),
        make_beverage("Kendall Jackson Chardonnay - Wine Glass 6 oz Glass",
                      type_names=["White Wine"], category_ids=["recCh"]),
    ]
    return organize_by_hierarchy(beverages)


class TestSectionStats:
    """Per-section and per-group statistics."""

    def test_wine_section(self, stats_service, wine_menu):
        stats = stats_service.compute_hierarchy_stats(wine_menu)["wine"]

        assert stats.group_count == 2
        assert stats.total_items == 4
        assert stats.unique_items == 3
        assert stats.available_items == 3
        assert stats.avg_price == 22.0  # (12+44+10)/3, unpriced excluded
        assert (stats.price_range.min, stats.price_range.max) == (10.0, 44.0)

    def test_group_stats(self, stats_service, wine_menu):
        groups = stats_service.compute_group_stats(wine_menu)

        red = groups["wine-red-wines"]
        assert red.count == 3
        assert red.avg_price == 22.0
        assert red.min_price == 10.0
        assert red.max_price == 44.0

        white = groups["wine-white-wines"]
        assert white.count == 1
        assert white.avg_price == 0.0

    def test_custom_group_has_zero_count(self, stats_service, wine_menu):
        assert stats_service.compute_group_stats(wine_menu)["on-tap-sampler"].count == 0

    def test_empty_menu(self, stats_service):
        assert stats_service.compute_group_stats(Menu()) == {}
        assert stats_service.compute_hierarchy_stats(Menu()) == {}


class TestOverallStats:
    """Totals over a beverage list."""

    def test_overall(self, stats_service, wine_menu):
        stats = stats_service.compute_overall_stats(wine_menu.all_beverages())

        assert stats.total_beverages == 4
        assert stats.available_beverages == 3
        assert stats.avg_price == 22.0

    def test_empty(self, stats_service):
        stats = stats_service.compute_overall_stats([])
        assert stats.total_beverages == 0
        assert stats.avg_price == 0.0

    def test_availability(self, stats_service, wine_menu):
        stats = stats_service.compute_availability(wine_menu.all_beverages())

        assert stats.available == 3
        assert stats.unavailable == 1
        assert stats.availability_rate == 75.0

    def test_availability_empty(self, stats_service):
        assert stats_service.compute_availability([]).availability_rate == 0.0


class TestDistributions:
    """Price, format and category breakdowns."""

    def test_price_buckets(self, stats_service, make_beverage):
        beverages = [make_beverage(str(p), price=p) for p in (5, 10, 14.99, 25, 60)]
        beverages.append(make_beverage("No price"))

        buckets = {b.label: b.count for b in stats_service.compute_price_distribution(beverages)}

        assert buckets == {
            "Under $10": 2,
            "$10-15": 2,
            "$15-25": 0,
            "$25-50": 1,
            "Over $50": 1,
        }

    def test_format_counts(self, stats_service, make_beverage):
        beverages = [
            make_beverage("Stella - Draught 16 oz Glass"),
            make_beverage("Corona 12 oz Bottle"),
            make_beverage("White Claw 12 oz Can"),
            make_beverage("Mexican Mule"),
        ]

        assert stats_service.compute_format_stats(beverages) == {
            "draught": 1, "bottle": 1, "can": 1, "other": 1,
        }

    def test_category_distribution(self, stats_service, make_beverage):
        beverages = [
            make_beverage("A", category_names=["IPA"]),
            make_beverage("B", category_names=["IPA"]),
            make_beverage("C", category_ids=["recLager"]),
        ]

        assert stats_service.compute_category_distribution(beverages) == [("IPA", 2), ("recLager", 1)]

    def test_category_distribution_top(self, stats_service, make_beverage):
        beverages = [make_beverage(str(i), category_ids=[f"recC{i}"]) for i in range(15)]
        assert len(stats_service.compute_category_distribution(beverages, top=10)) == 10
