"""Typed column conversion for DMS rows.

SQLite columns are dynamically typed, so every reader checks the
value it gets before building a value object.
"""

from __future__ import annotations

from core.errors import DmsStoreError, StoreErrorKind


def require_int(value: object, table: str, column: str) -> int:
    """Return an INTEGER column value.

    Raises:
        DmsStoreError: If the stored value is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise _column_type_error(value, table, column, "integer")
    return value


def require_float(value: object, table: str, column: str) -> float:
    """Return a REAL column value, widening INTEGER storage to float.

    Raises:
        DmsStoreError: If the stored value is not numeric.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _column_type_error(value, table, column, "real")
    return float(value)


def require_text(value: object, table: str, column: str) -> str:
    """Return a TEXT column value verbatim.

    Raises:
        DmsStoreError: If the stored value is not text.
    """
    if not isinstance(value, str):
        raise _column_type_error(value, table, column, "text")
    return value


def _column_type_error(
    value: object,
    table: str,
    column: str,
    expected: str,
) -> DmsStoreError:
    stored = "null" if value is None else type(value).__name__
    return DmsStoreError(
        f"Invalid value in {table}.{column}: expected {expected}, got {stored}.",
        kind=StoreErrorKind.COLUMN_TYPE,
    )
