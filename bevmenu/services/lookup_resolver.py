"""
Lookup Resolver - Translates opaque reference ids into display names

Resolution order per id:
1. Server mapping for the kind
2. Name pattern inference (categories only), cached per resolver
3. Static fallback tables (formats, sizes)
4. Synthetic "<Kind> <last 6 chars>" label
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from bevmenu.config.fallback_maps import FALLBACK_FORMAT_MAP, FALLBACK_SIZE_MAP
from bevmenu.inference import extract_category_from_name, infer_type_from_name
from bevmenu.models.beverage import BeverageRecord, LookupMappings
from bevmenu.models.common import LookupKind, MappingSource
from bevmenu.models.menu import MappingStats

logger = logging.getLogger(__name__)

STATIC_FALLBACKS = {
    LookupKind.FORMAT: FALLBACK_FORMAT_MAP,
    LookupKind.SIZE: FALLBACK_SIZE_MAP,
}


def synthetic_label(kind: LookupKind, record_id: Optional[str]) -> str:
    """Display-only label for an id nothing could resolve."""
    return f"{kind.label} {(record_id or '')[-6:]}"


class LookupResolver:
    """
    Resolves ids for one data refresh.

    Pattern-derived category names are cached on the instance and kept
    apart from the server mapping so they can be reported separately.
    """

    def __init__(self, mappings: Optional[LookupMappings] = None):
        self.mappings = mappings or LookupMappings()
        self._pattern_cache: Dict[str, str] = {}

    def lookup(
        self,
        kind: LookupKind,
        record_id: Optional[str],
        beverage_name: Optional[str] = None,
        type_hint=None,
    ) -> Optional[Tuple[str, MappingSource]]:
        """Resolved name and its source, or None when nothing resolves."""
        if not record_id:
            return None

        server_name = self.mappings.for_kind(kind).get(record_id)
        if server_name:
            return server_name, MappingSource.SERVER

        if kind == LookupKind.CATEGORY:
            cached = self._pattern_cache.get(record_id)
            if cached:
                return cached, MappingSource.PATTERN
            if beverage_name:
                hint = type_hint or infer_type_from_name(beverage_name)
                extracted = extract_category_from_name(beverage_name, hint)
                if extracted:
                    self._pattern_cache[record_id] = extracted
                    logger.debug(f"Pattern mapped category {record_id} -> {extracted}")
                    return extracted, MappingSource.PATTERN

        static_name = STATIC_FALLBACKS.get(kind, {}).get(record_id)
        if static_name:
            return static_name, MappingSource.STATIC

        return None

    def get_name(
        self,
        kind: LookupKind,
        record_id: Optional[str],
        beverage_name: Optional[str] = None,
        type_hint=None,
    ) -> str:
        """Display name for an id; never fails."""
        found = self.lookup(kind, record_id, beverage_name, type_hint)
        if found:
            return found[0]
        return synthetic_label(kind, record_id)

    def get_category_name(self, category_id, beverage_name=None, type_hint=None) -> str:
        return self.get_name(LookupKind.CATEGORY, category_id, beverage_name, type_hint)

    def get_type_name(self, type_id) -> str:
        return self.get_name(LookupKind.TYPE, type_id)

    def get_format_name(self, format_id) -> str:
        return self.get_name(LookupKind.FORMAT, format_id)

    def get_size_name(self, size_id) -> str:
        return self.get_name(LookupKind.SIZE, size_id)

    def _resolved_names(
        self,
        kind: LookupKind,
        ids: Iterable[str],
        beverage_name: Optional[str] = None,
        type_hint=None,
    ) -> Optional[List[str]]:
        names = []
        for record_id in ids:
            found = self.lookup(kind, record_id, beverage_name, type_hint)
            if found and found[0] not in names:
                names.append(found[0])
        return names or None

    def resolve_record(self, beverage: BeverageRecord) -> BeverageRecord:
        """Copy of the record with every resolvable display name filled in."""
        type_names = self._resolved_names(LookupKind.TYPE, beverage.ids_for(LookupKind.TYPE))
        type_hint = type_names[0] if type_names else None

        update = {"type_names": type_names}
        for kind, field_name in (
            (LookupKind.CATEGORY, "category_names"),
            (LookupKind.FORMAT, "format_names"),
            (LookupKind.SIZE, "size_names"),
        ):
            update[field_name] = self._resolved_names(
                kind, beverage.ids_for(kind), beverage.name, type_hint
            )
        return beverage.model_copy(update=update)

    def resolve_records(self, beverages: Iterable[BeverageRecord]) -> List[BeverageRecord]:
        resolved = [self.resolve_record(b) for b in beverages]
        logger.info(
            f"Resolved {len(resolved)} beverages "
            f"({len(self._pattern_cache)} categories pattern mapped)"
        )
        return resolved

    @property
    def discovered_categories(self) -> Dict[str, str]:
        """Category ids mapped by name patterns during this pass."""
        return dict(self._pattern_cache)

    def mapping_stats(self, beverages: Iterable[BeverageRecord] = ()) -> MappingStats:
        """How the category ids seen in ``beverages`` resolve."""
        category_ids = set(self.mappings.categories)
        for beverage in beverages:
            category_ids.update(beverage.category_ids)
        category_ids.update(self._pattern_cache)

        server = sum(1 for c in category_ids if c in self.mappings.categories)
        pattern = sum(
            1 for c in category_ids
            if c not in self.mappings.categories and c in self._pattern_cache
        )
        return MappingStats(
            total_categories=len(category_ids),
            server_mapped=server,
            pattern_mapped=pattern,
            unmapped=len(category_ids) - server - pattern,
        )
