"""Global cell reader.

The global cell table must yield ids 1, 2, 3 in that order as the
store returns them. Any gap, swap, or short table rejects the whole
matrix; rows after the third are never read.
"""

from __future__ import annotations

import numpy as np

from core.constants import (
    GLOBAL_CELL_FIRST_ID,
    GLOBAL_CELL_ROW_COUNT,
    GLOBAL_CELL_TABLE_NAME,
)
from core.errors import DmsFormatError, FormatErrorKind
from core.logging_config import get_logger
from core.types import GlobalCell
from dms.column_values import require_float, require_int
from dms.store_handle import DmsStore, fetch_next

_LOGGER = get_logger(__name__)


def read_global_cell(store: DmsStore) -> GlobalCell:
    """Read and validate the 3x3 lattice matrix.

    Args:
        store: Open store handle.

    Returns:
        Validated global cell.

    Raises:
        DmsFormatError: If rows are missing or out of sequence.
        DmsStoreError: If the query fails or a column is mistyped.
    """
    cursor = store.execute(f"SELECT id, x, y, z FROM {GLOBAL_CELL_TABLE_NAME}")
    matrix = np.zeros((GLOBAL_CELL_ROW_COUNT, 3), dtype=np.float64)
    try:
        for index in range(GLOBAL_CELL_ROW_COUNT):
            row = fetch_next(store, cursor)
            if row is None:
                raise DmsFormatError(
                    f"Malformed {GLOBAL_CELL_TABLE_NAME} in {store.path}: expected "
                    f"{GLOBAL_CELL_ROW_COUNT} rows, found {index}.",
                    kind=FormatErrorKind.GLOBAL_CELL_MALFORMED,
                )
            row_id = require_int(row[0], GLOBAL_CELL_TABLE_NAME, "id")
            if row_id - GLOBAL_CELL_FIRST_ID != index:
                raise DmsFormatError(
                    f"Malformed {GLOBAL_CELL_TABLE_NAME} in {store.path}: row "
                    f"{index + 1} has id {row_id}, expected "
                    f"{index + GLOBAL_CELL_FIRST_ID}.",
                    kind=FormatErrorKind.GLOBAL_CELL_MALFORMED,
                )
            matrix[index] = [
                require_float(row[1], GLOBAL_CELL_TABLE_NAME, "x"),
                require_float(row[2], GLOBAL_CELL_TABLE_NAME, "y"),
                require_float(row[3], GLOBAL_CELL_TABLE_NAME, "z"),
            ]
    finally:
        cursor.close()
    _LOGGER.debug("global_cell_read", path=str(store.path))
    return GlobalCell(matrix)
