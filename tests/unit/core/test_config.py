"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import ImporterConfig, validate_table_name
from core.constants import DEFAULT_TABLE_NAME
from core.errors import SolarImportConfigError


def test_from_env_reads_data_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the data directory from environment."""
    monkeypatch.setenv("SOLAR_IMPORT_DATA_DIR", "./exports")

    config = ImporterConfig.from_env()

    assert config.data_dir.name == "exports"


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to default table and no database URL."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("SOLAR_IMPORT_TABLE", raising=False)

    config = ImporterConfig.from_env()

    assert (config.db_url, config.table_name) == (None, DEFAULT_TABLE_NAME)


def test_from_env_raises_for_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-numeric connection timeout."""
    monkeypatch.setenv("SOLAR_IMPORT_CONNECT_TIMEOUT", "soon")

    with pytest.raises(SolarImportConfigError):
        ImporterConfig.from_env()


def test_from_env_raises_for_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject a zero connection timeout."""
    monkeypatch.setenv("SOLAR_IMPORT_CONNECT_TIMEOUT", "0")

    with pytest.raises(SolarImportConfigError):
        ImporterConfig.from_env()


def test_from_env_raises_for_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject unsupported log levels."""
    monkeypatch.setenv("SOLAR_IMPORT_LOG_LEVEL", "verbose")

    with pytest.raises(SolarImportConfigError):
        ImporterConfig.from_env()


@pytest.mark.parametrize("table_name", ["energy", "metrics.energy_daily", "_private_3"])
def test_validate_table_name_accepts_identifiers(table_name: str) -> None:
    """Plain and schema-qualified identifiers should be accepted."""
    assert validate_table_name(table_name) == table_name


@pytest.mark.parametrize("table_name", ["energy; DROP TABLE x", "a.b.c", "1energy", ""])
def test_validate_table_name_rejects_unsafe_names(table_name: str) -> None:
    """Names that are not SQL identifiers should be rejected."""
    with pytest.raises(SolarImportConfigError):
        validate_table_name(table_name)
