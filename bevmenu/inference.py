"""
Name Inference

Keyword heuristics that recover a beverage's type, format or category from
its name when the lookup tables could not resolve them.

Each dimension is resolved by trying an ordered tuple of strategies; the
first strategy returning a non-empty value wins.
"""

import re
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Pattern, Sequence

from bevmenu.config.category_patterns import PATTERN_DOMAINS
from bevmenu.config.keywords import (
    BEER_KEYWORDS,
    BLUSH_WINE_KEYWORDS,
    BOTTLE_KEYWORDS,
    CIDER_RTD_KEYWORDS,
    COCKTAIL_KEYWORDS,
    DRAUGHT_KEYWORDS,
    FORMAT_BOTTLE,
    FORMAT_DRAUGHT,
    FORMAT_GLASS,
    GLASS_KEYWORDS,
    POUR_KEYWORDS,
    RED_WINE_KEYWORDS,
    TAP_TYPES,
    TYPE_BEER,
    TYPE_BLUSH,
    TYPE_CIDER_RTD,
    TYPE_COCKTAILS,
    TYPE_RED_WINE,
    TYPE_WHITE_WINE,
    TYPE_WINE,
    WHITE_WINE_KEYWORDS,
    WINE_KEYWORDS,
)
from bevmenu.models.beverage import BeverageRecord

Strategy = Callable[[BeverageRecord], Optional[List[str]]]


@lru_cache(maxsize=None)
def _keyword_regex(keywords: tuple) -> Pattern:
    alternatives = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    return re.compile(rf"(?<!\w)({alternatives})(?!\w)", re.IGNORECASE)


def has_keyword(text: Optional[str], keywords: Iterable[str]) -> bool:
    """True when any keyword appears in text as a whole word or phrase."""
    keywords = tuple(k for k in keywords if k)
    if not text or not keywords:
        return False
    return _keyword_regex(keywords).search(text) is not None


def matching_keywords(text: Optional[str], keywords: Iterable[str]) -> List[str]:
    if not text:
        return []
    return [k for k in keywords if k and _keyword_regex((k,)).search(text)]


# ============================================================================
# Single-value inference
# ============================================================================

def infer_wine_color(name: Optional[str]) -> Optional[str]:
    """'Red', 'White' or 'Blush' from varietal keywords; None if unclear."""
    if has_keyword(name, BLUSH_WINE_KEYWORDS):
        return "Blush"
    if has_keyword(name, RED_WINE_KEYWORDS):
        return "Red"
    if has_keyword(name, WHITE_WINE_KEYWORDS):
        return "White"
    return None


def infer_type_from_name(name: Optional[str]) -> Optional[str]:
    """Beverage type name from keywords in the beverage name."""
    if not name:
        return None

    if has_keyword(name, WINE_KEYWORDS):
        color = infer_wine_color(name)
        return {
            "Red": TYPE_RED_WINE,
            "White": TYPE_WHITE_WINE,
            "Blush": TYPE_BLUSH,
        }.get(color, TYPE_WINE)

    if has_keyword(name, CIDER_RTD_KEYWORDS):
        return TYPE_CIDER_RTD

    if has_keyword(name, BEER_KEYWORDS):
        return TYPE_BEER

    if has_keyword(name, COCKTAIL_KEYWORDS):
        return TYPE_COCKTAILS

    return None


def infer_format_from_name(name: Optional[str], type_hint: Optional[str] = None) -> Optional[str]:
    """Serving format from the beverage name.

    A plain "glass" pour counts as draught for tap types (beer, cider).
    """
    if not name:
        return None

    if has_keyword(name, DRAUGHT_KEYWORDS):
        return FORMAT_DRAUGHT
    if has_keyword(name, BOTTLE_KEYWORDS):
        return FORMAT_BOTTLE
    if has_keyword(name, POUR_KEYWORDS):
        return FORMAT_DRAUGHT
    if has_keyword(name, GLASS_KEYWORDS):
        type_hint = type_hint or infer_type_from_name(name)
        return FORMAT_DRAUGHT if type_hint in TAP_TYPES else FORMAT_GLASS
    return None


def extract_category_from_name(name: Optional[str], type_hint=None) -> Optional[str]:
    """
    Category label (varietal / style / cocktail) from the beverage name.

    Each pattern domain is gated: wine patterns are only tried when the
    name or type hint mentions wine or a varietal, beer patterns only for
    beer words, and so on.

    Args:
        name: Beverage name
        type_hint: Type name, or a list of them (the first is used)

    Returns:
        Canonical label, or None when nothing matches
    """
    if not name:
        return None

    if isinstance(type_hint, (list, tuple)):
        type_hint = type_hint[0] if type_hint else None
    hint = str(type_hint) if type_hint else ""

    for gate, patterns in PATTERN_DOMAINS:
        if not (gate.search(name) or gate.search(hint)):
            continue
        for entry in patterns:
            if entry.pattern.search(name):
                return entry.name

    return None


# ============================================================================
# Resolution strategies
# ============================================================================

def _resolved_types(beverage: BeverageRecord) -> Optional[List[str]]:
    return [t for t in (beverage.type_names or []) if t] or None


def _inferred_type(beverage: BeverageRecord) -> Optional[List[str]]:
    inferred = infer_type_from_name(beverage.name)
    return [inferred] if inferred else None


def _resolved_categories(beverage: BeverageRecord) -> Optional[List[str]]:
    return [c for c in (beverage.category_names or []) if c] or None


def _inferred_category(beverage: BeverageRecord) -> Optional[List[str]]:
    hint = beverage.primary_type or infer_type_from_name(beverage.name)
    extracted = extract_category_from_name(beverage.name, hint)
    return [extracted] if extracted else None


def _resolved_formats(beverage: BeverageRecord) -> Optional[List[str]]:
    return [f for f in (beverage.format_names or []) if f] or None


def _inferred_format(beverage: BeverageRecord) -> Optional[List[str]]:
    hint = beverage.primary_type or infer_type_from_name(beverage.name)
    inferred = infer_format_from_name(beverage.name, hint)
    return [inferred] if inferred else None


TYPE_STRATEGIES = (_resolved_types, _inferred_type)
CATEGORY_STRATEGIES = (_resolved_categories, _inferred_category)
FORMAT_STRATEGIES = (_resolved_formats, _inferred_format)


def resolve_with(beverage: BeverageRecord, strategies: Sequence[Strategy]) -> List[str]:
    """Values from the first strategy that yields any."""
    for strategy in strategies:
        values = strategy(beverage)
        if values:
            return values
    return []


def resolve_types(beverage: BeverageRecord) -> List[str]:
    return resolve_with(beverage, TYPE_STRATEGIES)


def resolve_categories(beverage: BeverageRecord) -> List[str]:
    return resolve_with(beverage, CATEGORY_STRATEGIES)


def resolve_formats(beverage: BeverageRecord) -> List[str]:
    return resolve_with(beverage, FORMAT_STRATEGIES)


# ============================================================================
# Subcategory extractors
# ============================================================================

def varietal_subcategory(beverage: BeverageRecord) -> Optional[str]:
    """Grape / style label, e.g. 'Pinot Noir'."""
    categories = resolve_categories(beverage)
    return categories[0] if categories else None


def serving_style_subcategory(beverage: BeverageRecord) -> Optional[str]:
    """'Draught', 'Bottles' or 'Other'."""
    formats = resolve_formats(beverage)
    primary = formats[0] if formats else None
    if primary in (FORMAT_DRAUGHT, FORMAT_GLASS):
        return "Draught"
    if primary in (FORMAT_BOTTLE, "Can", "Wine Bottle"):
        return "Bottles"
    return "Other"
