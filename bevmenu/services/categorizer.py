"""
Menu Categorizer - Flat (menu type, category) classification

Tries, in order: legacy type ids, category keywords, broad name
inference, then a low-confidence fallback. Keeps counters for the last
pass.
"""

import logging
from typing import Dict, Iterable, List, Optional

from bevmenu.config.fallback_maps import LEGACY_TYPE_MAPPINGS
from bevmenu.config.keywords import BOTTLE_KEYWORDS
from bevmenu.config.menu_types import DISPLAY_ORDER, MENU_TYPES
from bevmenu.inference import has_keyword, infer_wine_color, matching_keywords
from bevmenu.models.beverage import BeverageRecord
from bevmenu.models.common import MatchMethod
from bevmenu.models.menu import CategorizationResult, CategorizationStats

logger = logging.getLogger(__name__)

LEGACY_CONFIDENCE = 0.9
INFERENCE_CONFIDENCE = 0.6
FALLBACK_CONFIDENCE = 0.1

# Broad type words, checked in order
INFERENCE_RULES = (
    ("wine", ("wine", "cabernet", "merlot", "chardonnay", "pinot", "shiraz", "riesling")),
    ("beer", ("beer", "ale", "lager", "stout", "ipa", "pilsner", "porter")),
    ("cocktails", ("cocktail", "martini", "margarita", "mojito", "cosmopolitan")),
    ("other", ("seltzer", "cider", "hard")),
)

BEER_DRAUGHT_HINTS = ("glass", "pint", "oz", "draught", "draft", "tap")


class MenuCategorizer:
    """Classifies beverages into the flat menu types of ``MENU_TYPES``."""

    def __init__(self, menu_types: Dict = None, legacy_mappings: Dict[str, str] = None):
        self.menu_types = menu_types or MENU_TYPES
        self.legacy_mappings = legacy_mappings if legacy_mappings is not None else LEGACY_TYPE_MAPPINGS
        self.stats = CategorizationStats()

    def categorize(self, beverage: BeverageRecord) -> CategorizationResult:
        """Categorize one beverage and count it."""
        self.stats.total += 1

        result = self._try_legacy(beverage)
        if result:
            self.stats.by_legacy += 1
            return result

        result = self._try_keywords(beverage)
        if result:
            self.stats.by_keyword += 1
            return result

        result = self._try_inference(beverage)
        if result:
            self.stats.by_inference += 1
            return result

        self.stats.fallback += 1
        return CategorizationResult(
            menu_type="other",
            category="misc",
            confidence=FALLBACK_CONFIDENCE,
            method=MatchMethod.FALLBACK,
        )

    def categorize_all(
        self,
        beverages: Iterable[BeverageRecord],
    ) -> Dict[str, Dict[str, List[BeverageRecord]]]:
        """
        Bucket beverages as ``{menu_type: {category: [beverages]}}``.

        Resets the counters first. Buckets are sorted by the menu type's
        ``sort_by`` key (name or price).
        """
        self.reset_stats()
        results: Dict[str, Dict[str, List[BeverageRecord]]] = {}

        for beverage in beverages:
            result = self.categorize(beverage)
            results.setdefault(result.menu_type, {}).setdefault(result.category, []).append(beverage)
            distribution = self.stats.type_distribution
            distribution[result.menu_type] = distribution.get(result.menu_type, 0) + 1

        for menu_type, categories in results.items():
            sort_by = self.menu_types.get(menu_type, {}).get("sort_by", "name")
            for category, items in categories.items():
                if sort_by == "price":
                    items.sort(key=lambda b: b.price or 0.0)
                else:
                    items.sort(key=lambda b: ((b.name or "").casefold(), b.name or ""))

        logger.info(
            f"Categorized {self.stats.total} beverages: {self.stats.by_legacy} legacy, "
            f"{self.stats.by_keyword} keyword, {self.stats.by_inference} inference, "
            f"{self.stats.fallback} fallback"
        )
        return {k: results[k] for k in self.display_order(results)}

    def display_order(self, results: Dict) -> List[str]:
        ordered = [t for t in DISPLAY_ORDER if t in results]
        return ordered + [t for t in results if t not in ordered]

    def get_stats(self) -> CategorizationStats:
        return self.stats.model_copy(deep=True)

    def reset_stats(self):
        self.stats = CategorizationStats()

    def get_category_label(self, menu_type: str, category: str) -> str:
        """'Wine - Red' style label; raw keys when unknown."""
        type_config = self.menu_types.get(menu_type)
        category_config = (type_config or {}).get("categories", {}).get(category)
        if category_config:
            return f"{type_config['label']} - {category_config['label']}"
        return f"{menu_type} - {category}"

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _try_legacy(self, beverage: BeverageRecord) -> Optional[CategorizationResult]:
        for type_id in beverage.type_ids:
            menu_type = self.legacy_mappings.get(type_id)
            if menu_type:
                return CategorizationResult(
                    menu_type=menu_type,
                    category=self._category_for_type(beverage, menu_type),
                    confidence=LEGACY_CONFIDENCE,
                    method=MatchMethod.LEGACY,
                )
        return None

    def _try_keywords(self, beverage: BeverageRecord) -> Optional[CategorizationResult]:
        for menu_type, type_config in self.menu_types.items():
            for category, category_config in type_config["categories"].items():
                matched = matching_keywords(beverage.name, category_config["keywords"])
                if matched:
                    return CategorizationResult(
                        menu_type=menu_type,
                        category=category,
                        confidence=min(round(0.8 + 0.1 * len(matched), 2), 1.0),
                        method=MatchMethod.KEYWORD,
                        matched_keywords=matched,
                    )
        return None

    def _try_inference(self, beverage: BeverageRecord) -> Optional[CategorizationResult]:
        for menu_type, words in INFERENCE_RULES:
            if has_keyword(beverage.name, words):
                return CategorizationResult(
                    menu_type=menu_type,
                    category=self._category_for_type(beverage, menu_type),
                    confidence=INFERENCE_CONFIDENCE,
                    method=MatchMethod.INFERENCE,
                )
        return None

    def _category_for_type(self, beverage: BeverageRecord, menu_type: str) -> str:
        type_config = self.menu_types.get(menu_type)
        if not type_config:
            return "other"

        for category, category_config in type_config["categories"].items():
            if has_keyword(beverage.name, category_config["keywords"]):
                return category

        if menu_type == "wine":
            color = infer_wine_color(beverage.name)
            return color.lower() if color else "other"

        if menu_type == "beer":
            if has_keyword(beverage.name, BOTTLE_KEYWORDS) and not has_keyword(beverage.name, BEER_DRAUGHT_HINTS):
                return "bottles"
            return "draught"

        categories = list(type_config["categories"])
        return "other" if "other" in categories else (categories[0] if categories else "other")
