"""Unit tests for loader selection and transaction scope."""

from __future__ import annotations

import io
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest

from core.config import ImporterConfig
from core.errors import SolarImportConfigError, SolarImportStoreError
from core.types import ImportOptions, OutputRow, SourceFile
from store.dry_run_loader import DryRunRowLoader
from store.row_loader import open_row_loader
from store.timescale_loader import TimescaleRowLoader
from tests.fake_store import FakeDatabase, fake_execute_values

_SOURCE_FILE = SourceFile(year=2025, month=2, path=Path("2025.02.json"))
_ROW = OutputRow(
    bucket=datetime(2025, 2, 1, tzinfo=timezone.utc),
    source="solar_meter",
    measurement="accumulated_solar_energy",
    value=Decimal("12.50"),
)


def _config() -> ImporterConfig:
    return replace(ImporterConfig.from_env(), db_url=None)


def _use_fake_database(monkeypatch: pytest.MonkeyPatch) -> FakeDatabase:
    database = FakeDatabase()
    monkeypatch.setattr("store.row_loader.connect_store", database.connect)
    monkeypatch.setattr("store.timescale_loader.execute_values", fake_execute_values)
    return database


def test_dry_run_never_connects(monkeypatch: pytest.MonkeyPatch) -> None:
    """Dry-run should not connect even when a database URL is set."""
    database = _use_fake_database(monkeypatch)
    options = ImportOptions(
        data_dir=Path("."), db_url="postgresql://localhost/solar", dry_run=True
    )

    with open_row_loader(options, _config(), io.StringIO()) as loader:
        loader.load(_SOURCE_FILE, [_ROW])

    assert isinstance(loader, DryRunRowLoader) and database.connections == []


def test_live_mode_requires_database_url() -> None:
    """Live mode without a database URL should fail before connecting."""
    options = ImportOptions(data_dir=Path("."))

    with pytest.raises(SolarImportConfigError):
        with open_row_loader(options, _config(), io.StringIO()):
            pass


def test_live_mode_uses_config_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    """The configured database URL should be used when options omit it."""
    database = _use_fake_database(monkeypatch)
    config = replace(_config(), db_url="postgresql://localhost/solar")

    with open_row_loader(ImportOptions(data_dir=Path(".")), config, io.StringIO()) as loader:
        assert isinstance(loader, TimescaleRowLoader)

    assert len(database.connections) == 1


def test_live_mode_commits_and_closes(monkeypatch: pytest.MonkeyPatch) -> None:
    """A successful run should commit rows and close the connection."""
    database = _use_fake_database(monkeypatch)
    options = ImportOptions(data_dir=Path("."), db_url="postgresql://localhost/solar")

    with open_row_loader(options, _config(), io.StringIO()) as loader:
        loader.load(_SOURCE_FILE, [_ROW])

    connection = database.connections[0]
    assert len(database.rows) == 1 and connection.committed and connection.closed


def test_live_mode_rolls_back_on_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    """A failing run should roll back all rows loaded so far."""
    database = _use_fake_database(monkeypatch)
    options = ImportOptions(data_dir=Path("."), db_url="postgresql://localhost/solar")

    with pytest.raises(SolarImportStoreError):
        with open_row_loader(options, _config(), io.StringIO()) as loader:
            loader.load(_SOURCE_FILE, [_ROW])
            raise SolarImportStoreError("transport timeout")

    connection = database.connections[0]
    assert database.rows == {} and connection.rolled_back and connection.closed


def test_live_mode_rejects_unsafe_table_name(monkeypatch: pytest.MonkeyPatch) -> None:
    """An invalid table override should fail before connecting."""
    database = _use_fake_database(monkeypatch)
    options = ImportOptions(
        data_dir=Path("."),
        db_url="postgresql://localhost/solar",
        table_name="energy; DROP TABLE energy",
    )

    with pytest.raises(SolarImportConfigError):
        with open_row_loader(options, _config(), io.StringIO()):
            pass

    assert database.connections == []
