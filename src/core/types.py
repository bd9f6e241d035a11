"""Shared typed models.

This module defines immutable value objects read from DMS files.
None of them keeps a reference to the store they were read from.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np


@dataclass(frozen=True)
class SchemaVersion:
    """On-disk DMS format revision.

    Attributes:
        major: Major format version.
        minor: Minor format version.
    """

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True)
class GlobalCell:
    """Periodic simulation box as a 3x3 lattice matrix.

    Row ``i`` holds the x, y, z components of lattice vector ``i + 1``.
    The wrapped array is float64 and marked read-only.

    Attributes:
        matrix: Read-only ``(3, 3)`` float64 array.
    """

    matrix: np.ndarray

    def __post_init__(self) -> None:
        frozen = np.array(self.matrix, dtype=np.float64, copy=True)
        if frozen.shape != (3, 3):
            raise ValueError(f"global cell must be 3x3, got shape {frozen.shape}")
        frozen.setflags(write=False)
        object.__setattr__(self, "matrix", frozen)

    @property
    def vectors(self) -> tuple[tuple[float, float, float], ...]:
        """Lattice vectors as plain float triples."""
        return tuple((float(row[0]), float(row[1]), float(row[2])) for row in self.matrix)

    def to_lists(self) -> list[list[float]]:
        """Return the matrix as nested Python lists."""
        return [list(vector) for vector in self.vectors]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GlobalCell):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))

    def __hash__(self) -> int:
        return hash(self.vectors)


@dataclass(frozen=True)
class ProvenanceRecord:
    """One logged tool invocation that created or modified a DMS file.

    Attributes:
        id: Provenance row identifier.
        version: Tool version string, e.g. ``msys/1.7.140``.
        timestamp: Invocation time as stored.
        user: User string as stored.
        workdir: Working directory of the invocation.
        cmdline: Full command line.
        executable: Interpreter or binary path.
    """

    id: int
    version: str
    timestamp: str
    user: str
    workdir: str
    cmdline: str
    executable: str


@dataclass(frozen=True)
class DmsInfo:
    """Aggregate of every value the reader extracts from one file.

    Attributes:
        path: File the values were read from.
        version: Schema version.
        global_cell: Lattice matrix.
        provenance: Ordered provenance log.
    """

    path: Path
    version: SchemaVersion
    global_cell: GlobalCell
    provenance: tuple[ProvenanceRecord, ...]
