"""
Location Filter - Per-location beverage availability

Removes beverages whose unavailable-location list contains the selected
location id. Also holds the helpers used to pick and display a location.
"""

import logging
from typing import Iterable, List, Optional, Union

from bevmenu.models.beverage import BeverageRecord, Location
from bevmenu.models.menu import Menu
from bevmenu.models.rules import normalize_location_number

logger = logging.getLogger(__name__)


def filter_by_location(
    beverages: Iterable[BeverageRecord],
    location_id: Optional[str],
) -> List[BeverageRecord]:
    """Beverages available at ``location_id``; no location keeps everything."""
    beverages = list(beverages or [])
    if not location_id:
        return beverages
    return [b for b in beverages if not b.is_unavailable_at(location_id)]


def filter_hierarchy_by_location(menu: Menu, location_id: Optional[str]) -> Menu:
    """
    Apply the location filter to every group of an organized menu.

    Custom groups are kept as they are. Groups emptied by the filter are
    dropped, then sections left without groups.
    """
    if not location_id:
        return menu

    sections = []
    for section in menu.sections:
        groups = []
        for group in section.groups:
            if group.is_custom:
                groups.append(group)
                continue
            remaining = filter_by_location(group.beverages, location_id)
            if remaining:
                groups.append(group.with_beverages(remaining))
        if groups:
            sections.append(section.model_copy(update={"groups": groups}))

    before = len(menu.all_beverages())
    filtered = menu.model_copy(update={"sections": sections, "location_id": location_id})
    logger.info(f"Location {location_id}: {before} -> {len(filtered.all_beverages())} beverages")
    return filtered


# ============================================================================
# Location helpers
# ============================================================================

def format_location_name(location: Union[Location, dict]) -> str:
    """'Name - Area', or just the name when there is no area."""
    if isinstance(location, dict):
        fields = location.get("fields", location)
        location = Location(
            location_id=str(location.get("id", "")),
            name=(fields.get("Location Name") or "").strip() or "Unknown Location",
            area=fields.get("Location Area"),
        )
    return location.display_name


def location_slug(location: Union[Location, dict]) -> str:
    if isinstance(location, Location):
        return location.slug
    return Location(location_id="", name=format_location_name(location)).slug


def is_location_active(location: Location) -> bool:
    return location.active is not False


def active_locations(locations: Iterable[Location]) -> List[Location]:
    return [loc for loc in locations if is_location_active(loc)]


def find_location_by_slug(locations: Iterable[Location], slug: Optional[str]) -> Optional[Location]:
    if not slug:
        return None
    for location in locations:
        if location.slug == slug:
            return location
    return None


def resolve_selected_location(
    locations: Iterable[Location],
    selector: Optional[Union[str, int]] = None,
) -> Optional[Location]:
    """
    Pick the location to render.

    ``selector`` may be a location id, a location number or a slug. When it
    matches nothing (or is empty) the first active location is returned.
    """
    locations = list(locations or [])
    if selector not in (None, ""):
        for location in locations:
            if location.location_id == selector:
                return location

        number = normalize_location_number(selector)
        if number is not None:
            for location in locations:
                if location.number == number:
                    return location

        by_slug = find_location_by_slug(locations, str(selector))
        if by_slug:
            return by_slug

        logger.warning(f"Unknown location '{selector}', using default")

    active = active_locations(locations)
    return active[0] if active else None
