"""Core constants used across Molymod DMS modules.

This module centralizes table names, env keys, and formatter defaults.
Keeping values here avoids magic literals in reader logic.
"""

from __future__ import annotations

VERSION_TABLE_NAME = "dms_version"
GLOBAL_CELL_TABLE_NAME = "global_cell"
PROVENANCE_TABLE_NAME = "provenance"
GLOBAL_CELL_ROW_COUNT = 3
GLOBAL_CELL_FIRST_ID = 1
PROVENANCE_COLUMNS = (
    "id",
    "version",
    "timestamp",
    "user",
    "workdir",
    "cmdline",
    "executable",
)
CREATE_IF_MISSING_ENV = "MOLYMOD_CREATE_IF_MISSING"
LOG_LEVEL_ENV = "MOLYMOD_LOG_LEVEL"
DEFAULT_CREATE_IF_MISSING = True
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
TRUE_ENV_VALUES = ("1", "true", "yes", "on")
FALSE_ENV_VALUES = ("0", "false", "no", "off")
DEFAULT_MATRIX_FIELD_WIDTH = 12
DEFAULT_MATRIX_PRECISION = 3
DEFAULT_MATRIX_INDENT = 4
