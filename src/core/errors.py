"""Solar import exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class SolarImportError(Exception):
    """Base exception for all solar import failures."""


class SolarImportConfigError(SolarImportError):
    """Raised for invalid runtime configuration or options."""


class SolarImportIoError(SolarImportError):
    """Raised when a data directory or monthly file cannot be read."""


class SolarImportFormatError(SolarImportError):
    """Raised for malformed monthly payloads and unparseable values."""


class SolarImportStoreError(SolarImportError):
    """Raised for connection, transport, and constraint failures on load."""
