"""
Menu Data Models

The hierarchical Section -> Group -> beverages structure handed to the
renderer, plus the result models of the analytics services.
"""

from typing import Dict, List, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from bevmenu.models.beverage import BeverageRecord
from bevmenu.models.common import CustomItem, MatchMethod, PriceRange, VisibilityPolicy


# ============================================================================
# Menu Hierarchy
# ============================================================================

class MenuGroup(BaseModel):
    """A display group inside a section, e.g. 'IPAs' under 'ON TAP'."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    section_id: str
    title: Optional[str] = None
    order: int = 0
    icon: Optional[str] = None
    visibility: VisibilityPolicy = Field(default_factory=VisibilityPolicy)

    is_custom: bool = False
    custom_items: List[CustomItem] = Field(default_factory=list)

    beverages: List[BeverageRecord] = Field(default_factory=list)

    # record_id -> subcategory label, filled when the group defines an extractor
    subcategory_labels: Dict[str, str] = Field(default_factory=dict)

    @property
    def combined_id(self) -> str:
        return f"{self.section_id}-{self.group_id}"

    @property
    def is_empty(self) -> bool:
        return not self.is_custom and not self.beverages

    def with_beverages(self, beverages: List[BeverageRecord]) -> "MenuGroup":
        """Copy of this group holding a different beverage list."""
        keep = {b.record_id for b in beverages}
        labels = {k: v for k, v in self.subcategory_labels.items() if k in keep}
        return self.model_copy(update={"beverages": list(beverages), "subcategory_labels": labels})

    def subcategories(self) -> Dict[str, List[BeverageRecord]]:
        """Beverages bucketed by subcategory label, in beverage order."""
        buckets: Dict[str, List[BeverageRecord]] = {}
        for beverage in self.beverages:
            label = self.subcategory_labels.get(beverage.record_id, "Other")
            buckets.setdefault(label, []).append(beverage)
        return buckets


class MenuSection(BaseModel):
    """A top-level display bucket, e.g. 'ON TAP'."""

    model_config = ConfigDict(frozen=True)

    section_id: str
    title: str
    subtitle: Optional[str] = None
    order: int = 0
    icon: Optional[str] = None
    groups: List[MenuGroup] = Field(default_factory=list)

    def get_group(self, group_id: str) -> Optional[MenuGroup]:
        for group in self.groups:
            if group.group_id == group_id:
                return group
        return None


class Menu(BaseModel):
    """A fully organized menu for one render pass."""

    model_config = ConfigDict(frozen=True)

    sections: List[MenuSection] = Field(default_factory=list)
    location_id: Optional[str] = None
    location_number: Optional[int] = None

    def get_section(self, section_id: str) -> Optional[MenuSection]:
        for section in self.sections:
            if section.section_id == section_id:
                return section
        return None

    def get_group(self, section_id: str, group_id: str) -> Optional[MenuGroup]:
        section = self.get_section(section_id)
        return section.get_group(group_id) if section else None

    @property
    def section_ids(self) -> List[str]:
        return [s.section_id for s in self.sections]

    def all_beverages(self) -> List[BeverageRecord]:
        """Every distinct beverage in the menu, first occurrence order."""
        seen = set()
        result = []
        for section in self.sections:
            for group in section.groups:
                for beverage in group.beverages:
                    if beverage.record_id not in seen:
                        seen.add(beverage.record_id)
                        result.append(beverage)
        return result

    def to_dataframe(self) -> pd.DataFrame:
        """One row per (group, beverage) placement, for analysis."""
        rows = []
        for section in self.sections:
            for group in section.groups:
                for beverage in group.beverages:
                    rows.append({
                        "section_id": section.section_id,
                        "section_title": section.title,
                        "group_id": group.group_id,
                        "group_title": group.title,
                        "record_id": beverage.record_id,
                        "name": beverage.name,
                        "price": beverage.price,
                        "availability": beverage.availability,
                        "type": beverage.primary_type,
                        "format": beverage.primary_format,
                    })
        if not rows:
            return pd.DataFrame(columns=[
                "section_id", "section_title", "group_id", "group_title",
                "record_id", "name", "price", "availability", "type", "format",
            ])
        return pd.DataFrame(rows)


# ============================================================================
# Categorization Models
# ============================================================================

class CategorizationResult(BaseModel):
    """Flat (menu type, category) classification of one beverage."""

    menu_type: str
    category: str
    confidence: float = Field(..., ge=0, le=1)
    method: MatchMethod
    matched_keywords: List[str] = Field(default_factory=list)


class CategorizationStats(BaseModel):
    """Counters for one categorization pass."""

    total: int = 0
    by_legacy: int = 0
    by_keyword: int = 0
    by_inference: int = 0
    fallback: int = 0
    type_distribution: Dict[str, int] = Field(default_factory=dict)


# ============================================================================
# Analytics Models
# ============================================================================

class GroupStats(BaseModel):
    """Count and price statistics of one group."""

    group_id: str
    title: Optional[str] = None
    count: int = 0
    avg_price: float = 0.0
    min_price: float = 0.0
    max_price: float = 0.0


class SectionStats(BaseModel):
    """Statistics of one section and its groups."""

    section_id: str
    title: str
    group_count: int = 0
    total_items: int = 0
    unique_items: int = 0
    available_items: int = 0
    avg_price: float = 0.0
    price_range: PriceRange = Field(default_factory=PriceRange)
    groups: Dict[str, GroupStats] = Field(default_factory=dict)


class MappingStats(BaseModel):
    """How category ids were resolved."""

    total_categories: int = 0
    server_mapped: int = 0
    pattern_mapped: int = 0
    unmapped: int = 0


class AvailabilityStats(BaseModel):
    """Available vs. unavailable beverage counts."""

    total: int = 0
    available: int = 0
    unavailable: int = 0
    availability_rate: float = 0.0


class PriceBucket(BaseModel):
    """Beverage count inside one price band."""

    label: str
    min: float
    max: Optional[float] = None
    count: int = 0


# ============================================================================
# Wine Grouping Models
# ============================================================================

class WineServing(BaseModel):
    """One way a wine is poured or sold."""

    format: str = "Unknown"
    size: float = 0.0
    price: float = 0.0
    record: BeverageRecord


class WineEntry(BaseModel):
    """A wine with all of its serving options."""

    base_name: str
    grouping_key: str
    servings: List[WineServing] = Field(default_factory=list)

    @property
    def price_range(self) -> PriceRange:
        prices = [s.price for s in self.servings if s.price > 0]
        if not prices:
            return PriceRange()
        return PriceRange(min=min(prices), max=max(prices))


class OverallStats(BaseModel):
    """Totals across every beverage of a data set."""

    total_beverages: int = 0
    available_beverages: int = 0
    avg_price: float = 0.0
    price_range: PriceRange = Field(default_factory=PriceRange)
