"""Molymod DMS exception hierarchy.

This module defines tagged domain errors with clear boundaries.
Each error keeps the lower-level cause it wraps for diagnostics.
"""

from __future__ import annotations

from enum import Enum


class StoreErrorKind(str, Enum):
    """Failure categories raised by the backing SQLite store."""

    OPEN_FAILED = "open_failed"
    QUERY_FAILED = "query_failed"
    NO_ROWS = "no_rows"
    COLUMN_TYPE = "column_type"
    CLOSED = "closed"


class FormatErrorKind(str, Enum):
    """Failure categories for DMS layout validation."""

    GLOBAL_CELL_MALFORMED = "global_cell_malformed"


class DmsError(Exception):
    """Base exception for all Molymod DMS failures.

    Attributes:
        kind: Failure tag, or None for untagged errors.
        source: Wrapped lower-level exception, when any.
    """

    def __init__(
        self,
        message: str,
        kind: Enum | None = None,
        source: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.source = source


class DmsConfigError(DmsError):
    """Raised for invalid runtime configuration."""


class DmsStoreError(DmsError):
    """Raised for any failure of the backing SQLite store."""

    def __init__(
        self,
        message: str,
        kind: StoreErrorKind,
        source: BaseException | None = None,
    ) -> None:
        super().__init__(message, kind=kind, source=source)


class DmsFormatError(DmsError):
    """Raised when DMS tables do not have the expected layout."""

    def __init__(
        self,
        message: str,
        kind: FormatErrorKind = FormatErrorKind.GLOBAL_CELL_MALFORMED,
    ) -> None:
        super().__init__(message, kind=kind)
