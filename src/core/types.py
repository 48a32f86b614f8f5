"""Shared typed models.

This module defines immutable data models used by ingest, transform,
store, and CLI layers to keep stage interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path


@dataclass(frozen=True)
class SourceFile:
    """Monthly export file discovered by name convention.

    Attributes:
        year: Four-digit calendar year from the file name.
        month: Calendar month in [1, 12].
        path: Location of the JSON file.
    """

    year: int
    month: int
    path: Path

    @property
    def name(self) -> str:
        """File name used in logs and error messages."""
        return self.path.name


@dataclass(frozen=True)
class RawMonthlyData:
    """Per-day vendor values for one month, indexed from day zero.

    ``None`` marks a day the vendor reported as missing.

    Attributes:
        product_power: Solar production per day.
        use_power: Site consumption per day.
        self_use_power: Self-consumed solar production per day.
    """

    product_power: tuple[Decimal | None, ...]
    use_power: tuple[Decimal | None, ...]
    self_use_power: tuple[Decimal | None, ...]


@dataclass(frozen=True)
class DerivedMeasurement:
    """One derived daily measurement.

    Attributes:
        day: Calendar day of the measurement.
        source: Meter tag, ``solar_meter`` or ``energy_meter``.
        measurement: Measurement kind name.
        value: Computed value without rounding.
    """

    day: date
    source: str
    measurement: str
    value: Decimal


@dataclass(frozen=True)
class OutputRow:
    """Canonical row inserted into the time-series table.

    Attributes:
        bucket: UTC midnight timestamp of the measured day.
        source: Meter tag.
        measurement: Measurement kind name.
        value: Measurement value.
    """

    bucket: datetime
    source: str
    measurement: str
    value: Decimal


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one file batch.

    Attributes:
        file_name: Source file name of the batch.
        row_count: Rows submitted to the loader.
        inserted_count: Rows the store accepted; conflicts are skipped.
    """

    file_name: str
    row_count: int
    inserted_count: int


@dataclass(frozen=True)
class ImportOptions:
    """User-facing import request options."""

    data_dir: Path
    db_url: str | None = None
    dry_run: bool = False
    table_name: str | None = None


@dataclass(frozen=True)
class ImportSummary:
    """Totals reported after a completed import run."""

    file_count: int
    row_count: int
    inserted_count: int
    dry_run: bool
