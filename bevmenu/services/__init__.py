"""bevmenu Services"""

from bevmenu.services.availability_filter import (
    filter_available,
    filter_hierarchy,
    filter_hierarchy_by_availability,
    is_available,
)
from bevmenu.services.categorizer import MenuCategorizer
from bevmenu.services.grouping_engine import (
    beverage_belongs_to_group,
    get_all_groups,
    organize_by_hierarchy,
    should_show_group_at_location,
    sort_hierarchy_by_price,
)
from bevmenu.services.location_filter import (
    filter_by_location,
    filter_hierarchy_by_location,
    find_location_by_slug,
    format_location_name,
    is_location_active,
    location_slug,
    resolve_selected_location,
)
from bevmenu.services.lookup_resolver import LookupResolver
from bevmenu.services.menu_builder import MenuAccessors, MenuBuilder, MenuSnapshotStore, build_menu
from bevmenu.services.source_adapter import create_lookup_mappings, parse_beverage_records, parse_locations
from bevmenu.services.stats_service import StatsService
from bevmenu.services.wine_grouping import group_wines_by_base_name, parse_wine_serving

__all__ = [
    # Resolution
    "LookupResolver", "create_lookup_mappings", "parse_beverage_records", "parse_locations",
    # Grouping
    "organize_by_hierarchy", "beverage_belongs_to_group", "should_show_group_at_location",
    "sort_hierarchy_by_price", "get_all_groups",
    # Filters
    "filter_by_location", "filter_hierarchy_by_location", "is_available", "filter_available",
    "filter_hierarchy_by_availability", "filter_hierarchy",
    # Locations
    "format_location_name", "location_slug", "is_location_active", "find_location_by_slug",
    "resolve_selected_location",
    # Pipeline
    "MenuBuilder", "MenuSnapshotStore", "MenuAccessors", "build_menu",
    # Analytics
    "MenuCategorizer", "StatsService", "group_wines_by_base_name", "parse_wine_serving",
]
