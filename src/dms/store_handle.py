"""SQLite store handle for DMS files.

This module owns the single connection backing one DMS file.
Readers borrow the handle per call and never keep it.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from types import TracebackType

from core.config import DmsConfig
from core.errors import DmsStoreError, StoreErrorKind
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class DmsStore:
    """Owned connection to the SQLite store behind a DMS file.

    The connection is opened without same-thread checks. A handle must
    not be used from several threads at once without external locking.
    """

    def __init__(self, path: Path, connection: sqlite3.Connection) -> None:
        """Wrap an already validated connection.

        Use :meth:`open` instead of calling this directly.

        Args:
            path: Resolved file path.
            connection: Open SQLite connection.
        """
        self._path = path
        self._connection: sqlite3.Connection | None = connection

    @classmethod
    def open(cls, path: str | Path, config: DmsConfig | None = None) -> "DmsStore":
        """Open the store backing a DMS file.

        Args:
            path: DMS file path.
            config: Optional runtime configuration.

        Returns:
            Open store handle.

        Raises:
            DmsStoreError: If the file cannot be opened as a SQLite database.
        """
        resolved_config = config or DmsConfig()
        try:
            resolved_path = _resolve_store_path(path)
            uri = _build_store_uri(resolved_path, resolved_config.create_if_missing)
        except (OSError, RuntimeError, ValueError) as error:
            raise DmsStoreError(
                f"Failed to open DMS store at {path!r}: {error}.",
                kind=StoreErrorKind.OPEN_FAILED,
                source=error,
            ) from error
        try:
            connection = sqlite3.connect(uri, uri=True, check_same_thread=False)
        except sqlite3.Error as error:
            raise DmsStoreError(
                f"Failed to open DMS store at {resolved_path}: {error}.",
                kind=StoreErrorKind.OPEN_FAILED,
                source=error,
            ) from error
        try:
            connection.execute("PRAGMA schema_version").fetchone()
        except sqlite3.Error as error:
            connection.close()
            raise DmsStoreError(
                f"Failed to open DMS store at {resolved_path}: {error}. "
                "The file is not a readable SQLite database.",
                kind=StoreErrorKind.OPEN_FAILED,
                source=error,
            ) from error
        _LOGGER.info(
            "dms_store_opened",
            path=str(resolved_path),
            create_if_missing=resolved_config.create_if_missing,
        )
        return cls(resolved_path, connection)

    @property
    def path(self) -> Path:
        """Resolved path of the backing file."""
        return self._path

    @property
    def closed(self) -> bool:
        """Whether the connection has been released."""
        return self._connection is None

    def execute(self, sql: str) -> sqlite3.Cursor:
        """Run one read query and return its cursor.

        Args:
            sql: SQL statement without parameters.

        Returns:
            Cursor positioned before the first row.

        Raises:
            DmsStoreError: If the handle is closed or the query fails.
        """
        if self._connection is None:
            raise DmsStoreError(
                f"DMS store at {self._path} is closed.",
                kind=StoreErrorKind.CLOSED,
            )
        try:
            return self._connection.execute(sql)
        except sqlite3.Error as error:
            raise DmsStoreError(
                f"Query failed on DMS store at {self._path}: {error}.",
                kind=StoreErrorKind.QUERY_FAILED,
                source=error,
            ) from error

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        if self._connection is None:
            return
        connection = self._connection
        self._connection = None
        connection.close()
        _LOGGER.debug("dms_store_closed", path=str(self._path))

    def __enter__(self) -> "DmsStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def fetch_next(store: DmsStore, cursor: sqlite3.Cursor) -> tuple[object, ...] | None:
    """Fetch the next row of a cursor, mapping driver errors.

    Args:
        store: Handle the cursor belongs to, used in messages.
        cursor: Open cursor.

    Returns:
        Next row, or None when exhausted.

    Raises:
        DmsStoreError: If stepping the cursor fails.
    """
    try:
        return cursor.fetchone()
    except sqlite3.Error as error:
        raise DmsStoreError(
            f"Query failed on DMS store at {store.path}: {error}.",
            kind=StoreErrorKind.QUERY_FAILED,
            source=error,
        ) from error


def fetch_all(store: DmsStore, cursor: sqlite3.Cursor) -> list[tuple[object, ...]]:
    """Fetch every remaining row of a cursor, mapping driver errors.

    Raises:
        DmsStoreError: If stepping the cursor fails.
    """
    try:
        return cursor.fetchall()
    except sqlite3.Error as error:
        raise DmsStoreError(
            f"Query failed on DMS store at {store.path}: {error}.",
            kind=StoreErrorKind.QUERY_FAILED,
            source=error,
        ) from error


def _build_store_uri(path: Path, create_if_missing: bool) -> str:
    """Build the SQLite URI for a DMS file.

    Args:
        path: Absolute file path.
        create_if_missing: Whether a missing file may be created.

    Returns:
        ``file:`` URI with an explicit open mode.
    """
    mode = "rwc" if create_if_missing else "rw"
    return f"{path.as_uri()}?mode={mode}"


def _resolve_store_path(path: str | Path) -> Path:
    """Resolve a DMS file path to an absolute path.

    Raises:
        ValueError: If the path contains a NUL byte.
        OSError: If the path cannot be resolved.
        RuntimeError: If resolution hits a symlink loop.
    """
    if "\x00" in str(path):
        raise ValueError("path contains an embedded null byte")
    return Path(path).expanduser().resolve()
