"""Output row mapping transform.

This module maps derived measurements onto the table row schema.
"""

from __future__ import annotations

from datetime import datetime, time, timezone
from typing import Iterable

from core.types import DerivedMeasurement, OutputRow


def build_output_rows(measurements: Iterable[DerivedMeasurement]) -> list[OutputRow]:
    """Map measurements to rows bucketed at UTC midnight.

    Args:
        measurements: Derived daily measurements.

    Returns:
        One output row per measurement, in input order.
    """
    return [
        OutputRow(
            bucket=datetime.combine(measurement.day, time.min, tzinfo=timezone.utc),
            source=measurement.source,
            measurement=measurement.measurement,
            value=measurement.value,
        )
        for measurement in measurements
    ]
