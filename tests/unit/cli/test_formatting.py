"""Unit tests for CLI text rendering."""

from __future__ import annotations

from cli.formatting import format_matrix, format_provenance_record, format_version
from core.types import ProvenanceRecord, SchemaVersion


def test_format_matrix_uses_fixed_width_fields() -> None:
    """Each row should be indented with 12-wide, 3-decimal fields."""
    rendered = format_matrix([[10.0, 0.0, 0.0], [0.0, 10.0, 0.0], [0.0, 0.0, 10.0]])

    assert rendered.splitlines() == [
        "          10.000       0.000       0.000",
        "           0.000      10.000       0.000",
        "           0.000       0.000      10.000",
    ]


def test_format_matrix_accepts_custom_layout() -> None:
    """Width, precision, and indent should be parameters."""
    rendered = format_matrix([[1.25, -2.5]], width=6, precision=1, indent=0)

    assert rendered == "   1.2  -2.5"


def test_format_provenance_record_renders_block() -> None:
    """Provenance records should render as a five-line block."""
    record = ProvenanceRecord(
        id=1,
        version="msys/1.7.140",
        timestamp="Fri May 27 15:06:31 2016",
        user="gullingj",
        workdir="/w",
        cmdline="dms-select in.dms",
        executable="/bin/python2.7",
    )

    rendered = format_provenance_record(record)

    assert rendered == (
        "1) Fri May 27 15:06:31 2016 gullingj\n"
        "   version: msys/1.7.140\n"
        "   workdir: /w\n"
        "   cmdline: dms-select in.dms\n"
        "executable: /bin/python2.7"
    )


def test_format_version_renders_line() -> None:
    """Version line should show major.minor."""
    assert format_version(SchemaVersion(1, 7)) == "dms ver: 1.7"
