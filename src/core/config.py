"""Runtime configuration model for solar import.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_DATA_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TABLE_NAME,
    SUPPORTED_LOG_LEVELS,
    TABLE_NAME_PATTERN,
)
from core.errors import SolarImportConfigError


@dataclass(frozen=True)
class ImporterConfig:
    """Validated runtime configuration.

    Attributes:
        data_dir: Directory scanned for ``YYYY.MM.json`` files.
        db_url: Optional PostgreSQL connection URL.
        table_name: Target table, optionally schema-qualified.
        connect_timeout: Connection timeout in seconds.
        log_level: Minimum structured log level.
    """

    data_dir: Path
    db_url: str | None
    table_name: str
    connect_timeout: int
    log_level: str

    @classmethod
    def from_env(cls) -> "ImporterConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SolarImportConfigError: If environment values are invalid.
        """
        data_dir_value = os.getenv("SOLAR_IMPORT_DATA_DIR", str(DEFAULT_DATA_DIR))
        db_url = os.getenv("DATABASE_URL") or None
        table_name = validate_table_name(os.getenv("SOLAR_IMPORT_TABLE", DEFAULT_TABLE_NAME))
        connect_timeout = _parse_connect_timeout(
            os.getenv("SOLAR_IMPORT_CONNECT_TIMEOUT", str(DEFAULT_CONNECT_TIMEOUT_SECONDS))
        )
        log_level = _parse_log_level(os.getenv("SOLAR_IMPORT_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            data_dir=Path(data_dir_value).expanduser(),
            db_url=db_url,
            table_name=table_name,
            connect_timeout=connect_timeout,
            log_level=log_level,
        )


def validate_table_name(raw_value: str) -> str:
    """Validate a plain or schema-qualified table identifier.

    Args:
        raw_value: Table name such as ``energy`` or ``schema.energy``.

    Returns:
        The unchanged table name.

    Raises:
        SolarImportConfigError: If the name is not a safe SQL identifier.
    """
    if not TABLE_NAME_PATTERN.match(raw_value):
        raise SolarImportConfigError(
            f"Invalid table name '{raw_value}': expected identifier or schema.identifier. "
            "Set SOLAR_IMPORT_TABLE or --table to a plain table name."
        )
    return raw_value


def _parse_connect_timeout(raw_value: str) -> int:
    """Parse the connection timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        SolarImportConfigError: If value is not a positive integer.
    """
    try:
        timeout = int(raw_value)
    except ValueError as error:
        raise SolarImportConfigError(
            "Invalid SOLAR_IMPORT_CONNECT_TIMEOUT value: "
            f"expected integer, got '{raw_value}'. "
            "Set SOLAR_IMPORT_CONNECT_TIMEOUT to a number of seconds."
        ) from error
    if timeout <= 0:
        raise SolarImportConfigError(
            f"Invalid SOLAR_IMPORT_CONNECT_TIMEOUT value: expected > 0, got {timeout}."
        )
    return timeout


def _parse_log_level(raw_value: str) -> str:
    """Normalize and validate the log level environment value."""
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise SolarImportConfigError(
            f"Invalid SOLAR_IMPORT_LOG_LEVEL value '{raw_value}'. "
            f"Supported levels: {SUPPORTED_LOG_LEVELS}."
        )
    return level
