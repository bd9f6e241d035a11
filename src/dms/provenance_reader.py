"""Provenance log reader."""

from __future__ import annotations

from core.constants import PROVENANCE_COLUMNS, PROVENANCE_TABLE_NAME
from core.logging_config import get_logger
from core.types import ProvenanceRecord
from dms.column_values import require_int, require_text
from dms.store_handle import DmsStore, fetch_all

_LOGGER = get_logger(__name__)


def read_provenance(store: DmsStore) -> tuple[ProvenanceRecord, ...]:
    """Read every provenance record ordered by id.

    Any number of rows, including none, is valid. Column values are
    returned verbatim.

    Args:
        store: Open store handle.

    Returns:
        Provenance records in ascending id order.

    Raises:
        DmsStoreError: If the query fails or a column is mistyped.
    """
    cursor = store.execute(
        f"SELECT {', '.join(PROVENANCE_COLUMNS)} FROM {PROVENANCE_TABLE_NAME} ORDER BY id"
    )
    try:
        rows = fetch_all(store, cursor)
    finally:
        cursor.close()
    records = tuple(_record_from_row(row) for row in rows)
    _LOGGER.debug("provenance_read", path=str(store.path), record_count=len(records))
    return records


def _record_from_row(row: tuple[object, ...]) -> ProvenanceRecord:
    """Build one provenance record from a projected row."""
    values = dict(zip(PROVENANCE_COLUMNS, row))
    return ProvenanceRecord(
        id=require_int(values["id"], PROVENANCE_TABLE_NAME, "id"),
        version=require_text(values["version"], PROVENANCE_TABLE_NAME, "version"),
        timestamp=require_text(values["timestamp"], PROVENANCE_TABLE_NAME, "timestamp"),
        user=require_text(values["user"], PROVENANCE_TABLE_NAME, "user"),
        workdir=require_text(values["workdir"], PROVENANCE_TABLE_NAME, "workdir"),
        cmdline=require_text(values["cmdline"], PROVENANCE_TABLE_NAME, "cmdline"),
        executable=require_text(values["executable"], PROVENANCE_TABLE_NAME, "executable"),
    )
