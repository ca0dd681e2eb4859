"""
Stats Service - Menu counts and price statistics

Aggregates are computed with pandas over ``Menu.to_dataframe()`` or a
frame built from a plain beverage list.
"""

import math
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from bevmenu.inference import has_keyword
from bevmenu.models.beverage import BeverageRecord
from bevmenu.models.common import PriceRange
from bevmenu.models.menu import (
    AvailabilityStats,
    GroupStats,
    Menu,
    MenuSection,
    OverallStats,
    PriceBucket,
    SectionStats,
)
from bevmenu.services.availability_filter import is_available
from bevmenu.services.wine_grouping import wine_grouping_key
from bevmenu.settings import get_settings

PRICE_BUCKETS = (
    ("Under $10", 0.0, 10.0),
    ("$10-15", 10.0, 15.0),
    ("$15-25", 15.0, 25.0),
    ("$25-50", 25.0, 50.0),
    ("Over $50", 50.0, None),
)


class StatsService:
    """Computes menu statistics."""

    def __init__(self, valid_value: Optional[str] = None):
        self.valid_value = valid_value or get_settings().valid_availability_value

    def compute_section_stats(self, section: MenuSection) -> SectionStats:
        """Counts and prices of one organized section."""
        beverages = [b for g in section.groups for b in g.beverages]
        prices = self._positive_prices(beverages)

        if section.section_id == "wine":
            unique_items = len({wine_grouping_key(b) for b in beverages})
        else:
            unique_items = len(beverages)

        return SectionStats(
            section_id=section.section_id,
            title=section.title,
            group_count=len(section.groups),
            total_items=len(beverages),
            unique_items=unique_items,
            available_items=sum(1 for b in beverages if is_available(b, self.valid_value)),
            avg_price=self._mean(prices),
            price_range=self._price_range(prices),
            groups=self.compute_group_stats(Menu(sections=[section])),
        )

    def compute_hierarchy_stats(self, menu: Menu) -> Dict[str, SectionStats]:
        return {s.section_id: self.compute_section_stats(s) for s in menu.sections}

    def compute_group_stats(self, menu: Menu) -> Dict[str, GroupStats]:
        """Per-group counts and prices keyed by combined group id."""
        stats = {}
        for section in menu.sections:
            for group in section.groups:
                stats[group.combined_id] = GroupStats(group_id=group.group_id, title=group.title)

        df = menu.to_dataframe()
        if df.empty:
            return stats

        df["combined_id"] = df["section_id"] + "-" + df["group_id"]
        df["price"] = pd.to_numeric(df["price"], errors="coerce")
        counts = df.groupby("combined_id")["record_id"].count()

        priced = df[df["price"] > 0]
        price_agg = priced.groupby("combined_id")["price"].agg(["mean", "min", "max"])

        for combined_id, group_stats in stats.items():
            update = {"count": int(counts.get(combined_id, 0))}
            if combined_id in price_agg.index:
                row = price_agg.loc[combined_id]
                update.update(
                    avg_price=round(float(row["mean"]), 2),
                    min_price=float(row["min"]),
                    max_price=float(row["max"]),
                )
            stats[combined_id] = group_stats.model_copy(update=update)
        return stats

    def compute_overall_stats(self, beverages: Iterable[BeverageRecord]) -> OverallStats:
        beverages = list(beverages)
        prices = self._positive_prices(beverages)
        return OverallStats(
            total_beverages=len(beverages),
            available_beverages=sum(1 for b in beverages if is_available(b, self.valid_value)),
            avg_price=self._mean(prices),
            price_range=self._price_range(prices),
        )

    def compute_availability(self, beverages: Iterable[BeverageRecord]) -> AvailabilityStats:
        beverages = list(beverages)
        total = len(beverages)
        available = sum(1 for b in beverages if is_available(b, self.valid_value))
        return AvailabilityStats(
            total=total,
            available=available,
            unavailable=total - available,
            availability_rate=round(available / total * 100, 1) if total else 0.0,
        )

    def compute_price_distribution(self, beverages: Iterable[BeverageRecord]) -> List[PriceBucket]:
        """Beverage counts per price band; a missing price counts as 0."""
        prices = pd.Series([b.price or 0.0 for b in beverages], dtype="float64")
        buckets = []
        for label, low, high in PRICE_BUCKETS:
            upper = math.inf if high is None else high
            count = int(((prices >= low) & (prices < upper)).sum())
            buckets.append(PriceBucket(label=label, min=low, max=high, count=count))
        return buckets

    def compute_format_stats(self, beverages: Iterable[BeverageRecord]) -> Dict[str, int]:
        """Counts of draught / bottle / can / other servings, read from names."""
        counts: Dict[str, int] = {}
        for beverage in beverages:
            fmt = self._format_from_name(beverage.name)
            counts[fmt] = counts.get(fmt, 0) + 1
        return counts

    def compute_category_distribution(
        self,
        beverages: Iterable[BeverageRecord],
        top: int = 10,
    ) -> List[Tuple[str, int]]:
        """Most frequent categories, by resolved name where available."""
        labels = []
        for beverage in beverages:
            labels.extend(beverage.category_names or beverage.category_ids)
        if not labels:
            return []
        counts = pd.Series(labels).value_counts()
        return [(str(k), int(v)) for k, v in counts.head(top).items()]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _positive_prices(self, beverages: Iterable[BeverageRecord]) -> List[float]:
        return [b.price for b in beverages if b.price and b.price > 0]

    def _mean(self, prices: List[float]) -> float:
        return round(sum(prices) / len(prices), 2) if prices else 0.0

    def _price_range(self, prices: List[float]) -> PriceRange:
        if not prices:
            return PriceRange()
        return PriceRange(min=min(prices), max=max(prices))

    def _format_from_name(self, name: Optional[str]) -> str:
        if has_keyword(name, ("glass", "draught", "draft")):
            return "draught"
        if has_keyword(name, ("bottle",)):
            return "bottle"
        if has_keyword(name, ("can",)):
            return "can"
        return "other"
