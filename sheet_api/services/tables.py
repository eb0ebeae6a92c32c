# sheet_api/services/tables.py
"""
Table operations on top of a TableStore: read all records, append one, and
the update/delete placeholders.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from sheet_api.models.sheets import MessageResponse
from sheet_api.store.base import CellValue, Row, TableStore

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: Dict[str, List[str]] = {
    "Letters": ["from", "to", "content", "date", "timestamp"],
    "Wishlist": ["title", "description", "by", "date", "timestamp"],
    "Dreams": ["dream", "category", "completed", "date", "timestamp"],
    "Stories": ["title", "content", "author", "date", "timestamp"],
    "Scores": ["game", "player", "score", "date", "timestamp"],
}
FALLBACK_HEADERS = ["data", "date", "timestamp"]

SETUP_TABLES = ["Letters", "Wishlist", "Dreams", "Stories", "Scores"]

TIMESTAMP_FIELD = "timestamp"

UPDATE_NOT_IMPLEMENTED = "Update not implemented"
DELETE_NOT_IMPLEMENTED = "Delete not implemented"


# ---- Helpers ----

def default_headers(name: str) -> List[str]:
    return list(DEFAULT_HEADERS.get(name, FALLBACK_HEADERS))


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC instant as ISO-8601 with milliseconds, e.g. 2026-10-19T08:15:30.123Z."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _require_name(name: Optional[str]) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("Sheet name is required")
    return name


def _to_cell(value: Any) -> CellValue:
    # Falsy values (None, 0, False, "") all collapse to an empty cell.
    if not value:
        return ""
    if isinstance(value, (str, int, float, bool)):
        return value
    return json.dumps(value, ensure_ascii=False)


def _row_to_record(headers: Row, row: Row) -> Dict[str, CellValue]:
    # zip stops at the shorter side: headers added after this row was
    # written are left out of the record.
    return {str(header): value for header, value in zip(headers, row)}


# ---- Operations ----

def ensure_table(store: TableStore, name: Optional[str]) -> bool:
    """
    Create ``name`` with its default header row unless it already exists.
    Returns True when the table was created.
    """
    name = _require_name(name)
    if store.exists(name):
        return False

    headers = default_headers(name)
    store.create(name, headers)
    logger.info("Created sheet %r with headers %s", name, headers)
    return True


def list_records(store: TableStore, name: Optional[str]) -> List[Dict[str, CellValue]]:
    """
    Return every data row of ``name`` as a header->value mapping, oldest first.

    A missing table is created on the spot and reads as empty.
    """
    name = _require_name(name)
    if ensure_table(store, name):
        return []

    values = store.get_values(name)
    if len(values) <= 1:
        return []

    headers = values[0]
    return [_row_to_record(headers, row) for row in values[1:]]


def append_record(
    store: TableStore,
    name: Optional[str],
    fields: Any,
    now: Optional[datetime] = None,
) -> None:
    """
    Append ``fields`` as a new last row of ``name``.

    ``timestamp`` is always overwritten with the write time. Keys the header
    row does not know yet are added to it in the order they appear. Header
    columns missing from ``fields``, or mapped to a falsy value, are written
    as "".

    Header rewrite and row append are two separate store calls with nothing
    held in between.
    """
    name = _require_name(name)
    if not isinstance(fields, Mapping):
        raise TypeError(f"Row data must be a JSON object, got {type(fields).__name__}")

    ensure_table(store, name)

    row_data = dict(fields)
    row_data[TIMESTAMP_FIELD] = iso_timestamp(now)

    values = store.get_values(name)
    headers: Row = list(values[0]) if values else []

    new_headers = [key for key in row_data if key not in headers]
    if new_headers:
        headers = headers + new_headers
        store.set_header(name, headers)
        logger.info("Sheet %r grew headers: %s", name, new_headers)

    store.append_row(name, [_to_cell(row_data.get(header)) for header in headers])


def update_record(store: TableStore, name: Optional[str], fields: Any) -> MessageResponse:
    return MessageResponse(success=False, message=UPDATE_NOT_IMPLEMENTED)


def delete_record(store: TableStore, name: Optional[str], fields: Any) -> MessageResponse:
    return MessageResponse(success=False, message=DELETE_NOT_IMPLEMENTED)


def initialize_tables(store: TableStore) -> List[str]:
    """Make sure every curated table exists. Returns the names that were created."""
    return [name for name in SETUP_TABLES if ensure_table(store, name)]
