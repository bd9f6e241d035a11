"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


def pytest_sessionstart() -> None:
    """Put src and the project root on sys.path for test imports."""
    for import_root in (_PROJECT_ROOT, _PROJECT_ROOT / "src"):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))


@pytest.fixture(autouse=True)
def _clear_molymod_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host MOLYMOD_* settings out of test runs."""
    monkeypatch.delenv("MOLYMOD_CREATE_IF_MISSING", raising=False)
    monkeypatch.delenv("MOLYMOD_LOG_LEVEL", raising=False)
