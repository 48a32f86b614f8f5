"""Monthly source file discovery.

This module scans a data directory for ``YYYY.MM.json`` exports.
Entries that do not follow the naming convention are skipped.
"""

from __future__ import annotations

from datetime import MINYEAR
from pathlib import Path
from typing import Iterator

from core.constants import SOURCE_FILE_NAME_PATTERN
from core.errors import SolarImportIoError
from core.types import SourceFile


def locate_source_files(data_dir: Path) -> Iterator[SourceFile]:
    """Yield monthly source files found directly under a directory.

    Args:
        data_dir: Directory holding monthly exports. Not recursed.

    Yields:
        Source files in directory listing order.

    Raises:
        SolarImportIoError: If the directory cannot be listed.
    """
    try:
        entries = list(data_dir.iterdir())
    except OSError as error:
        raise SolarImportIoError(
            f"Failed to read data directory {data_dir}: {error.strerror or error}. "
            "Provide an existing, readable directory."
        ) from error
    for entry in entries:
        source_file = parse_source_file_name(entry)
        if source_file is not None and entry.is_file():
            yield source_file


def sorted_source_files(data_dir: Path) -> list[SourceFile]:
    """Return discovered source files ordered by (year, month)."""
    return sorted(
        locate_source_files(data_dir),
        key=lambda source_file: (source_file.year, source_file.month),
    )


def parse_source_file_name(path: Path) -> SourceFile | None:
    """Parse ``YYYY.MM.json`` into a source file.

    Args:
        path: Candidate file path.

    Returns:
        Parsed source file, or None when the name does not match,
        the year is below ``datetime.MINYEAR``, or the month is
        outside [1, 12].
    """
    match = SOURCE_FILE_NAME_PATTERN.match(path.name)
    if match is None:
        return None
    year = int(match.group("year"))
    month = int(match.group("month"))
    if year < MINYEAR or not 1 <= month <= 12:
        return None
    return SourceFile(year=year, month=month, path=path)
