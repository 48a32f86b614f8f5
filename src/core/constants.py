"""Core constants used across solar import modules.

This module centralizes vendor field names, tags, and defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

import re
from pathlib import Path

DEFAULT_DATA_DIR = Path(".")
DEFAULT_TABLE_NAME = "_timescaledb_internal._materialized_hypertable_3"
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10
DEFAULT_LOG_LEVEL = "info"
SOURCE_FILE_NAME_PATTERN = re.compile(r"^(?P<year>[0-9]{4})\.(?P<month>[0-9]{2})\.json$")
TABLE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")
MISSING_VALUE_SENTINEL = "--"
PAYLOAD_DATA_FIELD = "data"
PRODUCT_POWER_FIELD = "productPower"
USE_POWER_FIELD = "usePower"
SELF_USE_POWER_FIELD = "selfUsePower"
SOLAR_METER_SOURCE = "solar_meter"
ENERGY_METER_SOURCE = "energy_meter"
ACCUMULATED_SOLAR_ENERGY = "accumulated_solar_energy"
ACTIVE_ENERGY_EXPORTED = "active_energy_exported"
ACTIVE_ENERGY_IMPORTED = "active_energy_imported"
OUTPUT_COLUMNS = ("bucket", "source", "measurement", "value")
CONFLICT_KEY_COLUMNS = ("bucket", "source", "measurement")
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
