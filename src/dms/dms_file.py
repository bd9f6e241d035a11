"""DMS file facade.

This module bundles a store handle with the three readers so callers
can work with one object per file.
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

from core.config import DmsConfig
from core.logging_config import get_logger
from core.types import DmsInfo, GlobalCell, ProvenanceRecord, SchemaVersion
from dms.global_cell_reader import read_global_cell
from dms.provenance_reader import read_provenance
from dms.store_handle import DmsStore
from dms.version_reader import read_schema_version

_LOGGER = get_logger(__name__)


class DmsFile:
    """Read-only view of one DMS file.

    This class owns its store handle; close it or use it as a context
    manager to release the underlying file.
    """

    def __init__(self, store: DmsStore) -> None:
        self._store = store

    @classmethod
    def open(cls, path: str | Path, config: DmsConfig | None = None) -> "DmsFile":
        """Open a DMS file.

        Args:
            path: DMS file path.
            config: Optional runtime configuration.

        Returns:
            Open DMS file.

        Raises:
            DmsStoreError: If the backing store cannot be opened.
        """
        return cls(DmsStore.open(path, config))

    @property
    def path(self) -> Path:
        return self._store.path

    def schema_version(self) -> SchemaVersion:
        """Read the schema version."""
        return read_schema_version(self._store)

    def global_cell(self) -> GlobalCell:
        """Read the validated global cell."""
        return read_global_cell(self._store)

    def provenance(self) -> tuple[ProvenanceRecord, ...]:
        """Read the provenance log."""
        return read_provenance(self._store)

    def close(self) -> None:
        self._store.close()

    def __enter__(self) -> "DmsFile":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def read_dms_info(path: str | Path, config: DmsConfig | None = None) -> DmsInfo:
    """Read version, global cell, and provenance from one file.

    The file is closed on every exit path.

    Args:
        path: DMS file path.
        config: Optional runtime configuration.

    Returns:
        Aggregated file values.

    Raises:
        DmsStoreError: If opening or querying the store fails.
        DmsFormatError: If the global cell is malformed.
    """
    with DmsFile.open(path, config) as dms_file:
        info = DmsInfo(
            path=dms_file.path,
            version=dms_file.schema_version(),
            global_cell=dms_file.global_cell(),
            provenance=dms_file.provenance(),
        )
    _LOGGER.info(
        "dms_info_read",
        path=str(info.path),
        version=str(info.version),
        provenance_count=len(info.provenance),
    )
    return info
