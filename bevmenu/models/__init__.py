"""bevmenu Data Models"""

from bevmenu.models.beverage import BeverageRecord, Location, LookupMappings
from bevmenu.models.common import (
    CustomItem,
    LookupKind,
    MappingSource,
    MatchMethod,
    PriceRange,
    VisibilityPolicy,
)
from bevmenu.models.menu import (
    AvailabilityStats,
    CategorizationResult,
    CategorizationStats,
    GroupStats,
    MappingStats,
    Menu,
    MenuGroup,
    MenuSection,
    OverallStats,
    PriceBucket,
    SectionStats,
    WineEntry,
    WineServing,
)

__all__ = [
    # Common
    "LookupKind", "MatchMethod", "MappingSource", "PriceRange", "CustomItem", "VisibilityPolicy",
    # Beverages
    "BeverageRecord", "Location", "LookupMappings",
    # Menu
    "Menu", "MenuSection", "MenuGroup",
    # Analytics
    "CategorizationResult", "CategorizationStats", "GroupStats", "SectionStats",
    "MappingStats", "AvailabilityStats", "OverallStats", "PriceBucket",
    # Wine
    "WineEntry", "WineServing",
]
