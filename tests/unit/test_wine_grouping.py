"""Tests for wine grouping."""

from bevmenu.services.wine_grouping import group_wines_by_base_name, parse_wine_serving, wine_base_name


class TestWineGrouping:
    """Collapsing serving variants."""

    def test_servings_grouped_glass_first(self, make_beverage):
        wines = [
            make_beverage("Meiomi Pinot Noir - Wine Bottle 25.4 oz Bottle", price=44, category_ids=["recPN"]),
            make_beverage("Meiomi Pinot Noir - Wine Glass 9 oz Glass", price=16, category_ids=["recPN"]),
            make_beverage("Meiomi Pinot Noir - Wine Glass 6 oz Glass", price=12, category_ids=["recPN"]),
        ]

        entries = group_wines_by_base_name(wines)

        assert len(entries) == 1
        entry = entries[0]
        assert entry.base_name == "Meiomi Pinot Noir"
        assert [(s.format, s.size) for s in entry.servings] == [
            ("Glass", 6.0), ("Glass", 9.0), ("Bottle", 25.4),
        ]
        assert (entry.price_range.min, entry.price_range.max) == (12.0, 44.0)

    def test_different_categories_kept_apart(self, make_beverage):
        wines = [
            make_beverage("House - Wine Glass 6 oz Glass", category_ids=["recRed"]),
            make_beverage("House - Wine Glass 6 oz Glass", category_ids=["recWhite"]),
        ]
        assert len(group_wines_by_base_name(wines)) == 2

    def test_empty(self):
        assert group_wines_by_base_name([]) == []


class TestParseServing:
    """Serving details from names."""

    def test_price_from_name_when_missing(self, make_beverage):
        serving = parse_wine_serving(make_beverage("Prosecco - Wine Glass 6 oz Glass $11"))
        assert serving.price == 11.0
        assert serving.format == "Glass"

    def test_volume_field_wins(self, make_beverage):
        serving = parse_wine_serving(make_beverage("Prosecco - Wine Glass 6 oz Glass", volume=5.0))
        assert serving.size == 5.0

    def test_unknown_format(self, make_beverage):
        serving = parse_wine_serving(make_beverage("Mystery Pour"))
        assert serving.format == "Unknown"
        assert serving.size == 0.0

    def test_base_name_without_wine_marker(self):
        assert wine_base_name("Opus One") == "Opus One"
