"""Public SDK surface for solar import.

This module provides a stable import path for library users.
It re-exports the pipeline entry point and typed option models.
"""

from __future__ import annotations

from core.config import ImporterConfig
from core.errors import (
    SolarImportConfigError,
    SolarImportError,
    SolarImportFormatError,
    SolarImportIoError,
    SolarImportStoreError,
)
from core.types import ImportOptions, ImportSummary, OutputRow, SourceFile
from ingest.pipeline import run_import
