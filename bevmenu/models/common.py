"""Common types used across bevmenu."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

# ============================================================================
# Enums
# ============================================================================

class LookupKind(str, Enum):
    """Namespaces of opaque reference ids."""
    CATEGORY = "categories"
    TYPE = "types"
    FORMAT = "formats"
    SIZE = "sizes"

    @property
    def label(self) -> str:
        """Prefix used for synthesized display names."""
        return {
            LookupKind.CATEGORY: "Category",
            LookupKind.TYPE: "Type",
            LookupKind.FORMAT: "Format",
            LookupKind.SIZE: "Size",
        }[self]


class MatchMethod(str, Enum):
    """How a beverage was categorized."""
    LEGACY = "legacy"
    KEYWORD = "keyword"
    INFERENCE = "inference"
    FALLBACK = "fallback"


class MappingSource(str, Enum):
    """Where a resolved display name came from."""
    SERVER = "server"
    PATTERN = "pattern"
    STATIC = "static"
    SYNTHETIC = "synthetic"


# ============================================================================
# Common Value Objects
# ============================================================================

class PriceRange(BaseModel):
    """Min/max price of a set of beverages."""
    min: float = 0.0
    max: float = 0.0


class CustomItem(BaseModel):
    """Static, non-data-driven menu entry (e.g. a beer sampler)."""
    title: str
    cost: Optional[float] = None
    text: str = ""
    size: Optional[str] = None


class VisibilityPolicy(BaseModel):
    """Include/exclude location numbers for a group."""
    include: Optional[List[int]] = Field(default=None)
    exclude: Optional[List[int]] = Field(default=None)
