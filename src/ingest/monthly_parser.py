"""Monthly export payload parsing.

This module decodes one vendor JSON export into typed daily values.
Only the three known series are extracted; other fields are ignored.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from typing import Any

from core.constants import (
    MISSING_VALUE_SENTINEL,
    PAYLOAD_DATA_FIELD,
    PRODUCT_POWER_FIELD,
    SELF_USE_POWER_FIELD,
    USE_POWER_FIELD,
)
from core.errors import SolarImportFormatError, SolarImportIoError
from core.types import RawMonthlyData, SourceFile


def read_monthly_file(source_file: SourceFile) -> RawMonthlyData:
    """Read and parse one monthly export file.

    Args:
        source_file: Discovered monthly file.

    Returns:
        Parsed daily series.

    Raises:
        SolarImportIoError: If the file cannot be read.
        SolarImportFormatError: If the payload is not UTF-8 or is malformed.
    """
    try:
        text = source_file.path.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise SolarImportFormatError(
            f"Invalid payload in {source_file.name}: not UTF-8 text ({error.reason} "
            f"at byte {error.start})."
        ) from error
    except OSError as error:
        raise SolarImportIoError(
            f"Failed to read monthly file {source_file.path}: {error}."
        ) from error
    return parse_monthly_payload(text, source_file.name)


def parse_monthly_payload(text: str, source_name: str) -> RawMonthlyData:
    """Parse vendor JSON text into daily series.

    Args:
        text: Raw JSON document.
        source_name: File name used for error context.

    Returns:
        Parsed daily series with sentinel days mapped to None.

    Raises:
        SolarImportFormatError: If JSON is invalid, required series are
            missing, or a non-sentinel value is not a finite number.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise SolarImportFormatError(
            f"Failed to parse JSON in {source_name} at line {error.lineno}: {error.msg}."
        ) from error
    data = _extract_data_object(payload, source_name)
    return RawMonthlyData(
        product_power=_parse_series(data, PRODUCT_POWER_FIELD, source_name),
        use_power=_parse_series(data, USE_POWER_FIELD, source_name),
        self_use_power=_parse_series(data, SELF_USE_POWER_FIELD, source_name),
    )


def _extract_data_object(payload: Any, source_name: str) -> dict[str, Any]:
    """Return the nested ``data`` object of a payload."""
    data = payload.get(PAYLOAD_DATA_FIELD) if isinstance(payload, dict) else None
    if not isinstance(data, dict):
        raise SolarImportFormatError(
            f"Invalid payload in {source_name}: expected object field '{PAYLOAD_DATA_FIELD}'."
        )
    return data


def _parse_series(
    data: dict[str, Any],
    field_name: str,
    source_name: str,
) -> tuple[Decimal | None, ...]:
    """Parse one daily series field.

    Args:
        data: Nested data object.
        field_name: Series field to read.
        source_name: File name used for error context.

    Returns:
        Per-day decimals with None for sentinel days.

    Raises:
        SolarImportFormatError: If the field is missing or malformed.
    """
    raw_series = data.get(field_name)
    if not isinstance(raw_series, list) or not all(
        isinstance(item, str) for item in raw_series
    ):
        raise SolarImportFormatError(
            f"Invalid payload in {source_name}: expected '{field_name}' "
            "to be an array of strings."
        )
    return tuple(
        _parse_value(raw_value, field_name, day_number, source_name)
        for day_number, raw_value in enumerate(raw_series, 1)
    )


def _parse_value(
    raw_value: str,
    field_name: str,
    day_number: int,
    source_name: str,
) -> Decimal | None:
    """Parse a single day value, mapping the sentinel to None.

    Any finite literal ``Decimal`` accepts is valid, including padded
    whitespace, digit-group underscores, and exponents.
    """
    if raw_value == MISSING_VALUE_SENTINEL:
        return None
    try:
        value = Decimal(raw_value)
    except InvalidOperation as error:
        raise SolarImportFormatError(
            f"Invalid value {raw_value!r} in {source_name} field '{field_name}' "
            f"day {day_number}: expected a decimal number or '{MISSING_VALUE_SENTINEL}'."
        ) from error
    if not value.is_finite():
        raise SolarImportFormatError(
            f"Invalid value {raw_value!r} in {source_name} field '{field_name}' "
            f"day {day_number}: value must be finite."
        )
    return value
