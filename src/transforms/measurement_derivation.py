"""Daily measurement derivation transform.

This module turns raw vendor series into derived energy measurements.
Days reported as missing produce no measurement instead of zero.
"""

from __future__ import annotations

import calendar
from datetime import date
from decimal import Decimal

from core.constants import (
    ACCUMULATED_SOLAR_ENERGY,
    ACTIVE_ENERGY_EXPORTED,
    ACTIVE_ENERGY_IMPORTED,
    ENERGY_METER_SOURCE,
    SOLAR_METER_SOURCE,
)
from core.types import DerivedMeasurement, RawMonthlyData, SourceFile


def derive_measurements(
    source_file: SourceFile,
    raw_data: RawMonthlyData,
) -> list[DerivedMeasurement]:
    """Derive up to three measurements per calendar day.

    - ``accumulated_solar_energy`` = productPower
    - ``active_energy_exported`` = productPower - selfUsePower
    - ``active_energy_imported`` = usePower - selfUsePower

    Each measurement is emitted only when all of its operands are
    present. Trailing entries beyond the month's day count are ignored.

    Args:
        source_file: Month the series belong to.
        raw_data: Parsed daily series.

    Returns:
        Measurements ordered by day, then measurement kind.
    """
    measurements: list[DerivedMeasurement] = []
    for day_index in range(_processable_day_count(source_file, raw_data)):
        day = date(source_file.year, source_file.month, day_index + 1)
        measurements.extend(
            _derive_day(
                day,
                raw_data.product_power[day_index],
                raw_data.use_power[day_index],
                raw_data.self_use_power[day_index],
            )
        )
    return measurements


def days_in_month(year: int, month: int) -> int:
    """Return the Gregorian day count of a month, leap years included."""
    return calendar.monthrange(year, month)[1]


def _processable_day_count(source_file: SourceFile, raw_data: RawMonthlyData) -> int:
    """Clamp series length to the calendar day count."""
    return min(
        days_in_month(source_file.year, source_file.month),
        len(raw_data.product_power),
        len(raw_data.use_power),
        len(raw_data.self_use_power),
    )


def _derive_day(
    day: date,
    product_power: Decimal | None,
    use_power: Decimal | None,
    self_use_power: Decimal | None,
) -> list[DerivedMeasurement]:
    """Derive the measurements available for one day."""
    measurements: list[DerivedMeasurement] = []
    if product_power is not None:
        measurements.append(
            DerivedMeasurement(day, SOLAR_METER_SOURCE, ACCUMULATED_SOLAR_ENERGY, product_power)
        )
    if product_power is not None and self_use_power is not None:
        measurements.append(
            DerivedMeasurement(
                day,
                ENERGY_METER_SOURCE,
                ACTIVE_ENERGY_EXPORTED,
                product_power - self_use_power,
            )
        )
    if use_power is not None and self_use_power is not None:
        measurements.append(
            DerivedMeasurement(
                day,
                ENERGY_METER_SOURCE,
                ACTIVE_ENERGY_IMPORTED,
                use_power - self_use_power,
            )
        )
    return measurements
