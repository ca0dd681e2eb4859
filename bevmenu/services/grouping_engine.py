"""
Grouping Engine - Sorts beverages into menu sections and groups

Pure functions: every call builds a new Menu; nothing is mutated.
"""

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from bevmenu.config.drink_groupings import DRINK_GROUPINGS
from bevmenu.errors import ConfigurationError
from bevmenu.inference import resolve_categories, resolve_formats, resolve_types
from bevmenu.models.beverage import BeverageRecord
from bevmenu.models.menu import Menu, MenuGroup, MenuSection
from bevmenu.models.rules import (
    GroupDefinition,
    SectionDefinition,
    normalize_location_number,
    normalize_location_numbers,
    ordered_sections,
)

logger = logging.getLogger(__name__)


def _policy_of(group: Any) -> Tuple[Optional[Tuple[int, ...]], Optional[Tuple[int, ...]]]:
    policy = getattr(group, "visibility", group)
    if isinstance(policy, dict):
        include, exclude = policy.get("include"), policy.get("exclude")
    else:
        include, exclude = getattr(policy, "include", None), getattr(policy, "exclude", None)
    return normalize_location_numbers(include), normalize_location_numbers(exclude)


def should_show_group_at_location(group: Any, location_number: Any) -> bool:
    """
    Whether a group is visible at a location number.

    Accepts a GroupDefinition, MenuGroup, VisibilityPolicy or a plain dict
    with ``include`` / ``exclude`` keys. No location shows everything.
    """
    number = normalize_location_number(location_number)
    if number is None:
        return True

    include, exclude = _policy_of(group)
    if include is not None:
        return number in include
    if exclude is not None:
        return number not in exclude
    return True


def sort_key(beverage: BeverageRecord) -> Tuple[str, str]:
    name = beverage.name or ""
    return name.casefold(), name


def sort_beverages(beverages: Iterable[BeverageRecord]) -> List[BeverageRecord]:
    return sorted(beverages, key=sort_key)


def _any_in(values: Sequence[str], allowed: Sequence[str]) -> bool:
    return any(v in allowed for v in values)


def beverage_belongs_to_group(beverage: BeverageRecord, group: GroupDefinition) -> bool:
    """True when every criterion the group defines passes."""
    if group.is_custom:
        return False

    if group.beverage_types is not None:
        if not _any_in(resolve_types(beverage), group.beverage_types):
            return False

    if group.beverage_categories is not None:
        if not _any_in(resolve_categories(beverage), group.beverage_categories):
            return False

    if group.beverage_formats is not None:
        if not _any_in(resolve_formats(beverage), group.beverage_formats):
            return False

    if group.predicate is not None and not group.predicate(beverage):
        return False

    return True


def build_group(
    section: SectionDefinition,
    group: GroupDefinition,
    beverages: Iterable[BeverageRecord],
) -> MenuGroup:
    """Instantiate one group with its matching beverages, sorted by name."""
    matches = [] if group.is_custom else sort_beverages(
        b for b in beverages if beverage_belongs_to_group(b, group)
    )

    labels = {}
    if group.subcategory is not None:
        for beverage in matches:
            label = group.subcategory(beverage)
            if label:
                labels[beverage.record_id] = label

    return MenuGroup(
        group_id=group.group_id,
        section_id=section.section_id,
        title=group.title,
        order=group.order,
        icon=group.icon,
        visibility=group.visibility,
        is_custom=group.is_custom,
        custom_items=list(group.custom_items),
        beverages=matches,
        subcategory_labels=labels,
    )


def organize_by_hierarchy(
    beverages: Iterable[BeverageRecord],
    sections: Iterable[SectionDefinition] = DRINK_GROUPINGS,
    location_number: Any = None,
    location_id: Optional[str] = None,
) -> Menu:
    """
    Organize beverages into the section/group hierarchy.

    Groups hidden at ``location_number`` are never built. Empty non-custom
    groups and sections left without groups are dropped. Beverages that
    match no group do not appear.
    """
    beverages = list(beverages or [])
    built_sections = []

    for section in ordered_sections(sections or ()):
        groups = []
        for group in section.ordered_groups():
            if not should_show_group_at_location(group, location_number):
                logger.debug(f"Group {section.section_id}-{group.group_id} hidden at {location_number}")
                continue
            built = build_group(section, group, beverages)
            if not built.is_empty:
                groups.append(built)

        if groups:
            built_sections.append(MenuSection(
                section_id=section.section_id,
                title=section.title,
                subtitle=section.subtitle,
                order=section.order,
                icon=section.icon,
                groups=groups,
            ))

    menu = Menu(
        sections=built_sections,
        location_id=location_id,
        location_number=normalize_location_number(location_number),
    )
    logger.info(
        f"Organized {len(beverages)} beverages into {len(built_sections)} sections "
        f"({len(menu.all_beverages())} placed)"
    )
    return menu


def sort_hierarchy_by_price(menu: Menu, descending: bool = False) -> Menu:
    """Copy of the menu with each group's beverages ordered by price.

    Beverages without a price go last; ties keep name order.
    """
    def price_key(beverage: BeverageRecord):
        missing = beverage.price is None
        price = beverage.price or 0.0
        return missing, -price if descending else price, sort_key(beverage)

    sections = []
    for section in menu.sections:
        groups = [
            g.with_beverages(sorted(g.beverages, key=price_key)) for g in section.groups
        ]
        sections.append(section.model_copy(update={"groups": groups}))
    return menu.model_copy(update={"sections": sections})


def get_all_groups(sections: Iterable[SectionDefinition] = DRINK_GROUPINGS) -> List[Tuple[str, GroupDefinition]]:
    """Every group with its combined "<section>-<group>" id."""
    return [
        (f"{section.section_id}-{group.group_id}", group)
        for section in ordered_sections(sections)
        for group in section.ordered_groups()
    ]


def validate_sections(sections: Iterable[SectionDefinition]) -> Tuple[SectionDefinition, ...]:
    """Reject duplicate section ids, or duplicate group ids inside a section."""
    sections = tuple(sections)
    seen_sections = set()
    for section in sections:
        if section.section_id in seen_sections:
            raise ConfigurationError(
                f"Duplicate section id: {section.section_id}",
                details={"section_id": section.section_id},
            )
        seen_sections.add(section.section_id)

        seen_groups = set()
        for group in section.groups:
            if group.group_id in seen_groups:
                raise ConfigurationError(
                    f"Duplicate group id in {section.section_id}: {group.group_id}",
                    details={"section_id": section.section_id, "group_id": group.group_id},
                )
            seen_groups.add(group.group_id)
    return sections
