"""Public SDK surface for Molymod DMS.

This module provides a stable import path for DMS readers.
It re-exports the file facade, readers, and typed value models.
"""

from __future__ import annotations

from core.config import DmsConfig
from core.errors import (
    DmsConfigError,
    DmsError,
    DmsFormatError,
    DmsStoreError,
    FormatErrorKind,
    StoreErrorKind,
)
from core.types import DmsInfo, GlobalCell, ProvenanceRecord, SchemaVersion
from dms.dms_file import DmsFile, read_dms_info
from dms.global_cell_reader import read_global_cell
from dms.provenance_reader import read_provenance
from dms.store_handle import DmsStore
from dms.version_reader import read_schema_version

__all__ = [
    "DmsConfig",
    "DmsConfigError",
    "DmsError",
    "DmsFile",
    "DmsFormatError",
    "DmsInfo",
    "DmsStore",
    "DmsStoreError",
    "FormatErrorKind",
    "GlobalCell",
    "ProvenanceRecord",
    "SchemaVersion",
    "StoreErrorKind",
    "read_dms_info",
    "read_global_cell",
    "read_provenance",
    "read_schema_version",
]
