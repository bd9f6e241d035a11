"""Shared DMS fixture builders for tests."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Iterable, Sequence

IDENTITY_CELL_ROWS = ((1, 10.0, 0.0, 0.0), (2, 0.0, 10.0, 0.0), (3, 0.0, 0.0, 10.0))
SAMPLE_PROVENANCE_ROW = (
    1,
    "msys/1.7.140",
    "Fri May 27 15:06:31 2016",
    "gullingj",
    "/u/nyc/gullingj/git/gerrit/sw/libs/msys/.",
    "dms-select tests/files/2f4k.dms --structure-only -o 2f4k.dms",
    "/proj/desrad-c/root/Linux/x86_64/Python/2.7.11-03st/bin/python2.7",
)


def build_dms_file(
    path: Path,
    version: tuple[int, int] | None = (1, 7),
    cell_rows: Iterable[Sequence[object]] | None = IDENTITY_CELL_ROWS,
    provenance_rows: Iterable[Sequence[object]] | None = (SAMPLE_PROVENANCE_ROW,),
) -> Path:
    """Write a minimal DMS file.

    Args:
        path: Output file path.
        version: Version row, or None to skip the version table.
        cell_rows: Global cell rows, or None to skip the table.
        provenance_rows: Provenance rows, or None to skip the table.

    Returns:
        The written path.
    """
    connection = sqlite3.connect(path)
    try:
        if version is not None:
            connection.execute("CREATE TABLE dms_version (major INTEGER, minor INTEGER)")
            connection.execute("INSERT INTO dms_version VALUES (?, ?)", version)
        if cell_rows is not None:
            connection.execute("CREATE TABLE global_cell (id INTEGER, x FLOAT, y FLOAT, z FLOAT)")
            connection.executemany("INSERT INTO global_cell VALUES (?, ?, ?, ?)", cell_rows)
        if provenance_rows is not None:
            connection.execute(
                "CREATE TABLE provenance (id INTEGER PRIMARY KEY, version TEXT, "
                "timestamp TEXT, user TEXT, workdir TEXT, cmdline TEXT, executable TEXT)"
            )
            connection.executemany(
                "INSERT INTO provenance VALUES (?, ?, ?, ?, ?, ?, ?)", provenance_rows
            )
        connection.commit()
    finally:
        connection.close()
    return path
