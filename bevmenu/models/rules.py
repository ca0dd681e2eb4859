"""
Grouping Rule Definitions

Static, load-once descriptions of menu sections and their groups.
These are configuration, not data: they are frozen after construction.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Tuple

from bevmenu.models.beverage import BeverageRecord
from bevmenu.models.common import CustomItem, VisibilityPolicy

Predicate = Callable[[BeverageRecord], bool]
Extractor = Callable[[BeverageRecord], Optional[str]]


def normalize_location_number(value: Any) -> Optional[int]:
    """Coerce a location number given as int or numeric string; else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    return None


def normalize_location_numbers(value: Any) -> Optional[Tuple[int, ...]]:
    """Coerce an include/exclude list; a lone scalar becomes a 1-tuple."""
    if value is None:
        return None
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        value = [value]
    try:
        items = list(value)
    except TypeError:
        return None
    numbers = (normalize_location_number(v) for v in items)
    return tuple(n for n in numbers if n is not None)


def _as_names(value: Any) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


@dataclass(frozen=True)
class GroupDefinition:
    """
    One grouping rule.

    Criteria left as ``None`` are not checked. A custom group never takes
    beverages; it renders its static ``custom_items`` instead.
    """
    group_id: str
    title: Optional[str] = None
    order: int = 0
    icon: Optional[str] = None

    beverage_types: Optional[Tuple[str, ...]] = None
    beverage_categories: Optional[Tuple[str, ...]] = None
    beverage_formats: Optional[Tuple[str, ...]] = None
    predicate: Optional[Predicate] = None
    subcategory: Optional[Extractor] = None

    include: Optional[Tuple[int, ...]] = None
    exclude: Optional[Tuple[int, ...]] = None

    is_custom: bool = False
    custom_items: Tuple[CustomItem, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "beverage_types", _as_names(self.beverage_types))
        object.__setattr__(self, "beverage_categories", _as_names(self.beverage_categories))
        object.__setattr__(self, "beverage_formats", _as_names(self.beverage_formats))
        object.__setattr__(self, "include", normalize_location_numbers(self.include))
        object.__setattr__(self, "exclude", normalize_location_numbers(self.exclude))
        object.__setattr__(self, "custom_items", tuple(self.custom_items))

    @property
    def visibility(self) -> VisibilityPolicy:
        return VisibilityPolicy(
            include=list(self.include) if self.include is not None else None,
            exclude=list(self.exclude) if self.exclude is not None else None,
        )


@dataclass(frozen=True)
class SectionDefinition:
    """A top-level menu section and its groups."""
    section_id: str
    title: str
    subtitle: Optional[str] = None
    order: int = 0
    icon: Optional[str] = None
    groups: Tuple[GroupDefinition, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "groups", tuple(self.groups))

    def ordered_groups(self) -> Tuple[GroupDefinition, ...]:
        return tuple(sorted(self.groups, key=lambda g: g.order))


def ordered_sections(sections: Iterable[SectionDefinition]) -> Tuple[SectionDefinition, ...]:
    return tuple(sorted(sections, key=lambda s: s.order))
