"""
Menu Builder - End-to-end menu pipeline

raw payloads -> parse -> resolve names -> organize -> location /
availability filters. A refresh that fails to parse falls back to the
last good snapshot, or an empty one.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from bevmenu.config.drink_groupings import DRINK_GROUPINGS
from bevmenu.errors import SourceDataError
from bevmenu.models.beverage import BeverageRecord, Location, LookupMappings
from bevmenu.models.menu import Menu
from bevmenu.models.rules import SectionDefinition, normalize_location_number
from bevmenu.services.availability_filter import filter_hierarchy
from bevmenu.services.grouping_engine import organize_by_hierarchy, validate_sections
from bevmenu.services.location_filter import resolve_selected_location
from bevmenu.services.lookup_resolver import LookupResolver
from bevmenu.services.source_adapter import (
    create_lookup_mappings,
    parse_beverage_records,
    parse_locations,
)
from bevmenu.settings import MenuSettings, get_settings

logger = logging.getLogger(__name__)


class MenuAccessors:
    """Name lookups handed to the renderer alongside a Menu."""

    def __init__(self, resolver: LookupResolver):
        self._resolver = resolver

    def get_category_name(self, category_id, beverage_name=None, type_hint=None) -> str:
        return self._resolver.get_category_name(category_id, beverage_name, type_hint)

    def get_type_name(self, type_id) -> str:
        return self._resolver.get_type_name(type_id)

    def get_format_name(self, format_id) -> str:
        return self._resolver.get_format_name(format_id)

    def get_size_name(self, size_id) -> str:
        return self._resolver.get_size_name(size_id)


@dataclass
class MenuSnapshot:
    """Parsed source data from one successful refresh."""
    beverages: List[BeverageRecord] = field(default_factory=list)
    locations: List[Location] = field(default_factory=list)
    mappings: LookupMappings = field(default_factory=LookupMappings)
    loaded_at: Optional[datetime] = None

    @property
    def is_empty(self) -> bool:
        return not self.beverages


class MenuSnapshotStore:
    """Keeps the last good snapshot so a bad refresh serves stale data."""

    def __init__(self):
        self._snapshot: Optional[MenuSnapshot] = None

    @property
    def current(self) -> MenuSnapshot:
        return self._snapshot or MenuSnapshot()

    def refresh(
        self,
        beverages_payload: Any,
        lookup_tables: Optional[Dict[str, Any]] = None,
        locations_payload: Any = None,
    ) -> MenuSnapshot:
        """Parse new payloads; on SourceDataError keep the previous snapshot."""
        try:
            snapshot = MenuSnapshot(
                beverages=parse_beverage_records(beverages_payload),
                locations=parse_locations(locations_payload),
                mappings=create_lookup_mappings(lookup_tables),
                loaded_at=datetime.now(),
            )
        except SourceDataError as e:
            logger.warning(f"Refresh failed ({e.code}: {e.message}), serving last good snapshot")
            return self.current

        self._snapshot = snapshot
        logger.info(
            f"Snapshot refreshed: {len(snapshot.beverages)} beverages, "
            f"{len(snapshot.locations)} locations"
        )
        return snapshot


@dataclass
class BuiltMenu:
    """A menu ready to render."""
    menu: Menu
    accessors: MenuAccessors
    location: Optional[Location] = None
    resolver: Optional[LookupResolver] = None


class MenuBuilder:
    """Runs the pipeline over a snapshot."""

    def __init__(
        self,
        sections: Iterable[SectionDefinition] = DRINK_GROUPINGS,
        settings: Optional[MenuSettings] = None,
    ):
        self.sections = validate_sections(sections)
        self.settings = settings or get_settings()

    def build(
        self,
        snapshot: MenuSnapshot,
        location: Optional[str] = None,
        only_available: Optional[bool] = None,
    ) -> BuiltMenu:
        """
        Organize and filter a snapshot for one location.

        Args:
            snapshot: Parsed source data
            location: Location id, number or slug; defaults to the configured
                default location, then the first active location
            only_available: Drop servings not flagged valid; defaults to settings

        Returns:
            BuiltMenu with the menu and name accessors
        """
        if only_available is None:
            only_available = self.settings.show_only_available

        selector = location if location not in (None, "") else self.settings.default_location
        selected = resolve_selected_location(snapshot.locations, selector) if snapshot.locations else None
        if selected:
            location_id, location_number = selected.location_id, selected.number
        elif selector not in (None, ""):
            # No matching location record: filter on the raw selector
            location_id, location_number = str(selector), normalize_location_number(selector)
        else:
            location_id, location_number = None, None

        resolver = LookupResolver(snapshot.mappings)
        beverages = resolver.resolve_records(snapshot.beverages)

        menu = organize_by_hierarchy(
            beverages,
            self.sections,
            location_number=location_number,
            location_id=location_id,
        )
        menu = filter_hierarchy(
            menu,
            location_id=location_id,
            only_available=only_available,
            valid_value=self.settings.valid_availability_value,
        )

        logger.info(
            f"Built menu for {selected.display_name if selected else location_id or 'all locations'}: "
            f"{len(menu.sections)} sections"
        )
        return BuiltMenu(menu=menu, accessors=MenuAccessors(resolver), location=selected, resolver=resolver)


def build_menu(
    beverages_payload: Any,
    lookup_tables: Optional[Dict[str, Any]] = None,
    locations_payload: Any = None,
    location: Optional[str] = None,
    only_available: Optional[bool] = None,
) -> BuiltMenu:
    """One-shot pipeline from raw payloads. Raises SourceDataError on a malformed payload."""
    snapshot = MenuSnapshot(
        beverages=parse_beverage_records(beverages_payload),
        locations=parse_locations(locations_payload),
        mappings=create_lookup_mappings(lookup_tables),
        loaded_at=datetime.now(),
    )
    return MenuBuilder().build(snapshot, location=location, only_available=only_available)
