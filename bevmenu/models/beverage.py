"""
Beverage Data Models

Typed views of the spreadsheet rows that feed the menu.
Records are owned by the source and never mutated here; enrichment
produces copies.
"""

import re
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from bevmenu.models.common import LookupKind


# ============================================================================
# Core Data Models
# ============================================================================

class BeverageRecord(BaseModel):
    """
    A single beverage serving (one row of the beverage table).

    The ``*_ids`` fields hold opaque reference ids exactly as the source
    sends them. The ``*_names`` fields are filled by the lookup resolver;
    ``None`` means resolution has not happened or failed.
    """

    model_config = ConfigDict(frozen=True)

    record_id: str = Field(..., description="Source record id")
    name: str = Field(default="", description="Display name, e.g. 'Stella - Draught 16 oz Glass'")
    price: Optional[float] = Field(default=None)
    availability: Optional[str] = Field(default=None, description="Raw 'Is valid size?' flag")
    volume: Optional[float] = Field(default=None, description="Serving volume in oz")

    # Reference ids
    type_ids: List[str] = Field(default_factory=list)
    category_ids: List[str] = Field(default_factory=list)
    format_ids: List[str] = Field(default_factory=list)
    size_ids: List[str] = Field(default_factory=list)

    # Location ids where this serving is NOT offered
    unavailable_locations: List[str] = Field(default_factory=list)

    # Resolved display names
    type_names: Optional[List[str]] = None
    category_names: Optional[List[str]] = None
    format_names: Optional[List[str]] = None
    size_names: Optional[List[str]] = None

    def ids_for(self, kind: LookupKind) -> List[str]:
        return {
            LookupKind.CATEGORY: self.category_ids,
            LookupKind.TYPE: self.type_ids,
            LookupKind.FORMAT: self.format_ids,
            LookupKind.SIZE: self.size_ids,
        }[kind]

    @property
    def primary_type(self) -> Optional[str]:
        return self.type_names[0] if self.type_names else None

    @property
    def primary_format(self) -> Optional[str]:
        return self.format_names[0] if self.format_names else None

    def is_unavailable_at(self, location_id: Optional[str]) -> bool:
        if not location_id:
            return False
        return location_id in self.unavailable_locations


class Location(BaseModel):
    """A restaurant location the menu can be rendered for."""

    model_config = ConfigDict(frozen=True)

    location_id: str
    name: str = "Unknown Location"
    area: Optional[str] = None
    active: bool = True
    number: Optional[int] = Field(default=None, description="Used by group include/exclude lists")

    @property
    def display_name(self) -> str:
        name = (self.name or "").strip() or "Unknown Location"
        area = (self.area or "").strip()
        if area:
            return f"{name} - {area}"
        return name

    @property
    def slug(self) -> str:
        slug = self.display_name.lower()
        slug = re.sub(r"\s+", "-", slug)
        slug = re.sub(r"[^a-z0-9-]", "", slug)
        slug = re.sub(r"-+", "-", slug)
        return slug.strip("-")


class LookupMappings(BaseModel):
    """Id -> display name tables, one per lookup kind."""

    categories: Dict[str, str] = Field(default_factory=dict)
    types: Dict[str, str] = Field(default_factory=dict)
    formats: Dict[str, str] = Field(default_factory=dict)
    sizes: Dict[str, str] = Field(default_factory=dict)

    def for_kind(self, kind: LookupKind) -> Dict[str, str]:
        return getattr(self, kind.value)

    @property
    def is_empty(self) -> bool:
        return not (self.categories or self.types or self.formats or self.sizes)
