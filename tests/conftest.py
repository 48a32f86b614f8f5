"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolate_import_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear importer environment variables so host settings cannot leak in."""
    for name in (
        "DATABASE_URL",
        "SOLAR_IMPORT_DATA_DIR",
        "SOLAR_IMPORT_TABLE",
        "SOLAR_IMPORT_CONNECT_TIMEOUT",
        "SOLAR_IMPORT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
