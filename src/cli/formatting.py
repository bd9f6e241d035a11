"""Text rendering for DMS values printed by the CLI."""

from __future__ import annotations

from typing import Sequence

from core.constants import (
    DEFAULT_MATRIX_FIELD_WIDTH,
    DEFAULT_MATRIX_INDENT,
    DEFAULT_MATRIX_PRECISION,
)
from core.types import ProvenanceRecord, SchemaVersion


def format_version(version: SchemaVersion) -> str:
    """Render the schema version line."""
    return f"dms ver: {version}"


def format_matrix(
    matrix: Sequence[Sequence[float]],
    width: int = DEFAULT_MATRIX_FIELD_WIDTH,
    precision: int = DEFAULT_MATRIX_PRECISION,
    indent: int = DEFAULT_MATRIX_INDENT,
) -> str:
    """Render a matrix as indented rows of fixed-width fields.

    Args:
        matrix: Row-major values.
        width: Field width per value.
        precision: Digits after the decimal point.
        indent: Leading spaces per row.

    Returns:
        One line per matrix row, joined by newlines.
    """
    prefix = " " * indent
    return "\n".join(
        prefix + "".join(f"{float(value):{width}.{precision}f}" for value in row)
        for row in matrix
    )


def format_provenance_record(record: ProvenanceRecord) -> str:
    """Render one provenance record as a five-line block."""
    return (
        f"{record.id}) {record.timestamp} {record.user}\n"
        f"   version: {record.version}\n"
        f"   workdir: {record.workdir}\n"
        f"   cmdline: {record.cmdline}\n"
        f"executable: {record.executable}"
    )
