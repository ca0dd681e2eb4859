"""Pytest configuration and fixtures."""

from typing import Callable, List

import pytest

from bevmenu.models.beverage import BeverageRecord, Location, LookupMappings
from bevmenu.settings import get_settings

VALID = "✅ Valid"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; drop the cache around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_beverage() -> Callable[..., BeverageRecord]:
    """Factory for beverage records with sensible defaults."""
    counter = {"n": 0}

    def _make(name: str, **kwargs) -> BeverageRecord:
        counter["n"] += 1
        kwargs.setdefault("record_id", f"recBev{counter['n']:06d}")
        kwargs.setdefault("availability", VALID)
        return BeverageRecord(name=name, **kwargs)

    return _make


@pytest.fixture
def cider_records(make_beverage) -> List[BeverageRecord]:
    """Two draught ciders and one bottled cider."""
    return [
        make_beverage(
            "Test Cider - Draught 16 oz Glass",
            record_id="recCiderA",
            type_names=["Cider & RTD"],
            format_names=["Draught"],
        ),
        make_beverage(
            "Second Cider - Draught 16 oz Glass",
            record_id="recCiderB",
            type_names=["Cider & RTD"],
            format_names=["Draught"],
            unavailable_locations=["1", "2"],
        ),
        make_beverage(
            "Test Cider - 12 oz Bottle",
            record_id="recCiderC",
            type_names=["Cider & RTD"],
            format_names=["Bottle"],
            unavailable_locations=["3"],
        ),
    ]


@pytest.fixture
def lookup_mappings() -> LookupMappings:
    return LookupMappings(
        categories={"recCatLager1": "Lager", "recCatIPA001": "American IPA"},
        types={
            "recTypeBeer1": "Beer",
            "recTypeCider": "Cider & RTD",
            "recTypeRed01": "Red Wine",
            "recTypeWhite": "White Wine",
        },
        formats={"recFmtDraft1": "Draught"},
        sizes={"recSize16oz": "16 oz"},
    )


@pytest.fixture
def locations() -> List[Location]:
    return [
        Location(location_id="recLoc1", name="Downtown", area="Bar", number=1, active=False),
        Location(location_id="recLoc3", name="Lakeside", area="Patio", number=3),
        Location(location_id="recLoc5", name="Airport", number=5),
    ]


@pytest.fixture
def beverages_payload() -> dict:
    """Raw beverage table payload."""
    return {
        "records": [
            {
                "id": "recRawCiderA",
                "fields": {
                    "Name": "Test Cider - Draught 16 oz Glass",
                    "Price": 8,
                    "Is valid size?": VALID,
                    "Beverage Type": ["recTypeCider"],
                    "Beverage Format": ["reckfsdGMlPPVFr4B"],
                    "Available Sizes": ["recSize16oz"],
                    "Volume": 16,
                },
            },
            {
                "id": "recRawCiderB",
                "fields": {
                    "Name": "Second Cider - Draught 16 oz Glass",
                    "Price": "$9.50",
                    "Is valid size?": VALID,
                    "Beverage Type": ["recTypeCider"],
                    "Beverage Format": ["reckfsdGMlPPVFr4B"],
                    "Unavailable Locations": ["recLoc1"],
                },
            },
            {
                "id": "recRawLager",
                "fields": {
                    "Name": "Stella Artois - Draught 16 oz Glass",
                    "Price": 7,
                    "Is valid size?": "❌ Invalid",
                    "Beverage Type": ["recTypeBeer1"],
                    "Beverage Categories (from Beverage Item)": ["recCatLager1"],
                    "Beverage Format": ["recFmtDraft1"],
                    "Unavailable Locations": ["recLoc5"],
                },
            },
        ]
    }


@pytest.fixture
def lookup_tables() -> dict:
    """Raw lookup table payloads."""
    return {
        "categories": [{"id": "recCatLager1", "fields": {"Name": "Lager"}}],
        "types": [
            {"id": "recTypeBeer1", "fields": {"Name": "Beer"}},
            {"id": "recTypeCider", "fields": {"Name": "Cider & RTD"}},
        ],
        "formats": [{"id": "recFmtDraft1", "fields": {"Name": "Draught"}}],
        "sizes": [{"id": "recSize16oz", "fields": {"Name": "16 oz"}}],
    }


@pytest.fixture
def locations_payload() -> list:
    return [
        {"id": "recLoc1", "fields": {"Location Name": "Downtown", "Location Area": "Bar", "Location Number": 1}},
        {"id": "recLoc3", "fields": {"Location Name": "Lakeside", "Location Area": "Patio", "Location Number": "3"}},
        {"id": "recLoc5", "fields": {"Location Name": "Airport", "Location Number": 5}},
    ]
