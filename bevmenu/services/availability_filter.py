"""
Availability Filter - Drops servings not flagged as valid

Pure and idempotent; commutes with the location filter.
"""

import logging
from typing import Callable, Iterable, List, Optional

from bevmenu.models.beverage import BeverageRecord
from bevmenu.models.menu import Menu
from bevmenu.services.location_filter import filter_hierarchy_by_location
from bevmenu.settings import get_settings

logger = logging.getLogger(__name__)


def _valid_value(valid_value: Optional[str]) -> str:
    return valid_value if valid_value is not None else get_settings().valid_availability_value


def is_available(beverage: BeverageRecord, valid_value: Optional[str] = None) -> bool:
    return beverage.availability == _valid_value(valid_value)


def filter_available(
    beverages: Iterable[BeverageRecord],
    valid_value: Optional[str] = None,
) -> List[BeverageRecord]:
    valid_value = _valid_value(valid_value)
    return [b for b in beverages or [] if is_available(b, valid_value)]


def _filter_groups(menu: Menu, keep: Callable[[BeverageRecord], bool]) -> Menu:
    sections = []
    for section in menu.sections:
        groups = []
        for group in section.groups:
            if group.is_custom:
                groups.append(group)
                continue
            remaining = [b for b in group.beverages if keep(b)]
            if remaining:
                groups.append(group.with_beverages(remaining))
        if groups:
            sections.append(section.model_copy(update={"groups": groups}))
    return menu.model_copy(update={"sections": sections})


def filter_hierarchy_by_availability(menu: Menu, valid_value: Optional[str] = None) -> Menu:
    """Drop unavailable beverages from every group, then empty groups and sections."""
    valid_value = _valid_value(valid_value)
    filtered = _filter_groups(menu, lambda b: is_available(b, valid_value))
    logger.debug(
        f"Availability filter: {len(menu.all_beverages())} -> {len(filtered.all_beverages())} beverages"
    )
    return filtered


def filter_hierarchy(
    menu: Menu,
    location_id: Optional[str] = None,
    only_available: bool = False,
    predicate: Optional[Callable[[BeverageRecord], bool]] = None,
    valid_value: Optional[str] = None,
) -> Menu:
    """Location, availability and custom filters in one pass."""
    menu = filter_hierarchy_by_location(menu, location_id)
    if only_available:
        menu = filter_hierarchy_by_availability(menu, valid_value)
    if predicate is not None:
        menu = _filter_groups(menu, predicate)
    return menu
