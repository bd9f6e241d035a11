"""Integration tests for reading a complete DMS file."""

from __future__ import annotations

import sqlite3
from concurrent.futures import ThreadPoolExecutor

import molymod
from tests.dms_fixtures import build_dms_file


def _build_structure_file(tmp_path):
    provenance_rows = [
        (1, "msys/1.7.140", "Fri May 27 15:06:31 2016", "gullingj", "/u/a", "dms-select", "/bin/py"),
        (2, "msys/1.7.141", "Sat May 28 09:00:00 2016", "other", "/u/b", "dms-fix", "/bin/py"),
    ]
    cell_rows = [(1, 31.5, 0.0, 0.0), (2, 0.0, 32.25, 0.0), (3, 0.0, 0.0, 33.0)]
    dms_path = build_dms_file(
        tmp_path / "2f4k.dms",
        version=(1, 7),
        cell_rows=cell_rows,
        provenance_rows=provenance_rows,
    )
    connection = sqlite3.connect(dms_path)
    connection.execute("CREATE TABLE particle (id INTEGER PRIMARY KEY, name TEXT, x FLOAT)")
    connection.execute("INSERT INTO particle VALUES (0, 'N', 1.0)")
    connection.commit()
    connection.close()
    return dms_path


def test_sdk_reads_complete_file(tmp_path) -> None:
    """SDK aggregate read should return every section of a real layout."""
    dms_path = _build_structure_file(tmp_path)

    info = molymod.read_dms_info(dms_path)

    assert info.version == molymod.SchemaVersion(1, 7)
    assert info.global_cell.vectors == ((31.5, 0.0, 0.0), (0.0, 32.25, 0.0), (0.0, 0.0, 33.0))
    assert [record.user for record in info.provenance] == ["gullingj", "other"]


def test_reading_does_not_modify_file(tmp_path) -> None:
    """Reads should leave file bytes unchanged."""
    dms_path = _build_structure_file(tmp_path)
    before = dms_path.read_bytes()

    molymod.read_dms_info(dms_path)

    assert dms_path.read_bytes() == before


def test_independent_handles_read_from_threads(tmp_path) -> None:
    """Separate handles on one path should work from separate threads."""
    dms_path = _build_structure_file(tmp_path)

    def _read_version(_: int) -> molymod.SchemaVersion:
        with molymod.DmsFile.open(dms_path) as dms_file:
            return dms_file.schema_version()

    with ThreadPoolExecutor(max_workers=4) as executor:
        versions = list(executor.map(_read_version, range(8)))

    assert set(versions) == {molymod.SchemaVersion(1, 7)}
