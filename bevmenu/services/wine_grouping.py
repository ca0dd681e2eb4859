"""
Wine Grouping - Collapses serving variants of one wine

"Meiomi - Wine Glass 6 oz Glass" and "Meiomi - Wine Bottle 25.4 oz Bottle"
become one entry with two servings, glass pours first.
"""

import re
from typing import Dict, Iterable, List, Optional

from bevmenu.models.beverage import BeverageRecord
from bevmenu.models.menu import WineEntry, WineServing

BASE_NAME_RE = re.compile(r"^(.+?)\s*-\s*Wine", re.IGNORECASE)
FORMAT_RE = re.compile(r"Wine\s+(Glass|Bottle)", re.IGNORECASE)
SIZE_RE = re.compile(r"(\d+(?:\.\d+)?)\s*oz", re.IGNORECASE)
PRICE_RE = re.compile(r"\$(\d+(?:\.\d+)?)")


def wine_base_name(name: Optional[str]) -> str:
    name = name or ""
    match = BASE_NAME_RE.match(name)
    return match.group(1).strip() if match else name


def wine_grouping_key(beverage: BeverageRecord) -> str:
    """Base name plus category ids, so same-named wines of different varietals stay apart."""
    categories = "|".join(beverage.category_ids) if beverage.category_ids else "unknown"
    return f"{wine_base_name(beverage.name)}__{categories}"


def parse_wine_serving(beverage: BeverageRecord) -> WineServing:
    name = beverage.name or ""
    format_match = FORMAT_RE.search(name)
    size_match = SIZE_RE.search(name)

    price = beverage.price
    if price is None:
        price_match = PRICE_RE.search(name)
        price = float(price_match.group(1)) if price_match else 0.0

    size = beverage.volume
    if size is None:
        size = float(size_match.group(1)) if size_match else 0.0

    return WineServing(
        format=format_match.group(1).title() if format_match else "Unknown",
        size=size,
        price=price,
        record=beverage,
    )


def _serving_order(serving: WineServing):
    return serving.format != "Glass", serving.size


def group_wines_by_base_name(wines: Iterable[BeverageRecord]) -> List[WineEntry]:
    """One entry per wine in first-seen order, servings glass first then by size."""
    entries: Dict[str, WineEntry] = {}
    for wine in wines:
        key = wine_grouping_key(wine)
        if key not in entries:
            entries[key] = WineEntry(base_name=wine_base_name(wine.name), grouping_key=key)
        entries[key].servings.append(parse_wine_serving(wine))

    for entry in entries.values():
        entry.servings.sort(key=_serving_order)
    return list(entries.values())
