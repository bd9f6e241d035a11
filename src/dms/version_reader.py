"""Schema version reader.

The version table is a single-row projection with no layout checks.
When several rows exist the first one the store returns wins.
"""

from __future__ import annotations

from core.constants import VERSION_TABLE_NAME
from core.errors import DmsStoreError, StoreErrorKind
from core.logging_config import get_logger
from core.types import SchemaVersion
from dms.column_values import require_int
from dms.store_handle import DmsStore, fetch_next

_LOGGER = get_logger(__name__)


def read_schema_version(store: DmsStore) -> SchemaVersion:
    """Read the DMS format revision.

    Args:
        store: Open store handle.

    Returns:
        Stored schema version.

    Raises:
        DmsStoreError: If the table is absent, empty, or mistyped.
    """
    cursor = store.execute(f"SELECT major, minor FROM {VERSION_TABLE_NAME}")
    try:
        row = fetch_next(store, cursor)
    finally:
        cursor.close()
    if row is None:
        raise DmsStoreError(
            f"No rows in {VERSION_TABLE_NAME} of DMS store at {store.path}.",
            kind=StoreErrorKind.NO_ROWS,
        )
    version = SchemaVersion(
        major=require_int(row[0], VERSION_TABLE_NAME, "major"),
        minor=require_int(row[1], VERSION_TABLE_NAME, "minor"),
    )
    _LOGGER.debug("schema_version_read", path=str(store.path), version=str(version))
    return version
