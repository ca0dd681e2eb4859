"""
Source Adapter - Parses spreadsheet-shaped payloads

Records arrive as ``{"id": ..., "fields": {...}}``. A single bad record is
skipped with a warning; a payload that is not a record list at all raises
SourceDataError.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from bevmenu.errors import SourceDataError
from bevmenu.models.beverage import BeverageRecord, Location, LookupMappings
from bevmenu.models.rules import normalize_location_number

logger = logging.getLogger(__name__)

# Source field names
FIELD_NAME = "Name"
FIELD_PRICE = "Price"
FIELD_AVAILABILITY = "Is valid size?"
FIELD_TYPE = "Beverage Type"
FIELD_CATEGORIES = "Beverage Categories (from Beverage Item)"
FIELD_FORMAT = "Beverage Format"
FIELD_SIZES = "Available Sizes"
FIELD_VOLUME = "Volume"
FIELD_UNAVAILABLE = "Unavailable Locations"

FIELD_LOCATION_NAME = "Location Name"
FIELD_LOCATION_AREA = "Location Area"
FIELD_LOCATION_ACTIVE = "Active"
FIELD_LOCATION_NUMBER = "Location Number"


def _records_of(payload: Any) -> List[Dict[str, Any]]:
    if payload is None:
        return []
    if isinstance(payload, dict):
        if "records" not in payload:
            raise SourceDataError("Payload has no 'records' list", details={"keys": list(payload)})
        payload = payload["records"]
    if not isinstance(payload, list):
        raise SourceDataError(
            "Payload is not a list of records",
            details={"type": type(payload).__name__},
        )
    return payload


def as_id_list(value: Any) -> List[str]:
    """Link fields may be a list, a single id, or missing."""
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v not in (None, "")]
    return [str(value)]


def as_number(value: Any) -> Optional[float]:
    """Parse 9, 9.5, '9.50' or '$9.50'; None when not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, (list, tuple)):
        return as_number(value[0]) if value else None
    match = re.search(r"-?\d+(?:\.\d+)?", str(value).replace(",", ""))
    return float(match.group()) if match else None


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return str(value[0]) if value else None
    return str(value)


def parse_beverage(record: Dict[str, Any]) -> BeverageRecord:
    fields = record.get("fields") or {}
    return BeverageRecord(
        record_id=record["id"],
        name=_as_text(fields.get(FIELD_NAME)) or "",
        price=as_number(fields.get(FIELD_PRICE)),
        availability=_as_text(fields.get(FIELD_AVAILABILITY)),
        volume=as_number(fields.get(FIELD_VOLUME)),
        type_ids=as_id_list(fields.get(FIELD_TYPE)),
        category_ids=as_id_list(fields.get(FIELD_CATEGORIES)),
        format_ids=as_id_list(fields.get(FIELD_FORMAT)),
        size_ids=as_id_list(fields.get(FIELD_SIZES)),
        unavailable_locations=as_id_list(fields.get(FIELD_UNAVAILABLE)),
    )


def parse_beverage_records(payload: Any) -> List[BeverageRecord]:
    """Typed beverage records from a raw payload."""
    beverages = []
    skipped = 0
    for record in _records_of(payload):
        try:
            beverages.append(parse_beverage(record))
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            skipped += 1
            logger.warning(f"Skipping malformed beverage record: {e}")

    logger.info(f"Parsed {len(beverages)} beverage records ({skipped} skipped)")
    return beverages


def parse_location(record: Dict[str, Any]) -> Location:
    fields = record.get("fields") or {}
    name = (_as_text(fields.get(FIELD_LOCATION_NAME)) or "").strip()
    area = (_as_text(fields.get(FIELD_LOCATION_AREA)) or "").strip()
    return Location(
        location_id=record["id"],
        name=name or "Unknown Location",
        area=area or None,
        active=fields.get(FIELD_LOCATION_ACTIVE) is not False,
        number=normalize_location_number(fields.get(FIELD_LOCATION_NUMBER)),
    )


def parse_locations(payload: Any) -> List[Location]:
    """Typed locations from a raw payload."""
    locations = []
    for record in _records_of(payload):
        try:
            locations.append(parse_location(record))
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            logger.warning(f"Skipping malformed location record: {e}")
    return locations


def _table_mapping(records: Any) -> Dict[str, str]:
    if records is None:
        return {}
    if not isinstance(records, (list, tuple)):
        logger.warning(f"Ignoring lookup table of type {type(records).__name__}")
        return {}

    mapping = {}
    for record in records:
        if not isinstance(record, dict):
            continue
        record_id = record.get("id")
        name = (record.get("fields") or {}).get(FIELD_NAME)
        if record_id and name:
            mapping[record_id] = str(name)
    return mapping


def create_lookup_mappings(tables: Optional[Dict[str, Any]]) -> LookupMappings:
    """
    Build id -> name tables from lookup payloads.

    ``tables`` holds ``categories`` / ``types`` / ``formats`` / ``sizes``
    record lists. Missing or unreadable tables become empty mappings.
    """
    if not isinstance(tables, dict):
        if tables is not None:
            logger.warning(f"Ignoring lookup tables of type {type(tables).__name__}")
        return LookupMappings()

    mappings = LookupMappings(
        categories=_table_mapping(tables.get("categories")),
        types=_table_mapping(tables.get("types")),
        formats=_table_mapping(tables.get("formats")),
        sizes=_table_mapping(tables.get("sizes")),
    )
    logger.info(
        f"Lookup mappings: {len(mappings.categories)} categories, {len(mappings.types)} types, "
        f"{len(mappings.formats)} formats, {len(mappings.sizes)} sizes"
    )
    return mappings
