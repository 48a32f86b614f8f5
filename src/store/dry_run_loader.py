"""Dry-run row rendering.

This module renders output rows as a fixed-width table for audit.
It performs no database or network I/O.
"""

from __future__ import annotations

from typing import Sequence, TextIO

from core.errors import SolarImportIoError
from core.types import LoadResult, OutputRow, SourceFile

_HEADER = f"{'bucket':<22} {'source':<15} {'measurement':<30} {'value':>10}"
_SEPARATOR = "-" * len(_HEADER)


class DryRunRowLoader:
    """Loader that writes rows to a text stream instead of a store."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._header_written = False

    def load(self, source_file: SourceFile, rows: Sequence[OutputRow]) -> LoadResult:
        """Render one file batch.

        Args:
            source_file: File the rows were derived from.
            rows: Output rows for the file.

        Returns:
            Result with zero inserted rows.

        Raises:
            SolarImportIoError: If the output stream cannot be written.
        """
        lines: list[str] = []
        if not self._header_written:
            lines.extend([_HEADER, _SEPARATOR])
        lines.extend(format_row(row) for row in rows)
        try:
            for line in lines:
                self._stream.write(line + "\n")
            self._stream.flush()
        except OSError as error:
            raise SolarImportIoError(
                f"Failed to render dry-run rows for {source_file.name}: {error}."
            ) from error
        self._header_written = True
        return LoadResult(file_name=source_file.name, row_count=len(rows), inserted_count=0)


def format_row(row: OutputRow) -> str:
    """Render one row as a fixed-width table line."""
    bucket = row.bucket.strftime("%Y-%m-%dT%H:%M:%SZ")
    return f"{bucket:<22} {row.source:<15} {row.measurement:<30} {row.value:>10.2f}"
