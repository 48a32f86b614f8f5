"""Import orchestration for monthly solar exports.

This module coordinates discovery, parsing, derivation, row building,
and loading for every monthly file in a data directory.
"""

from __future__ import annotations

import sys
from typing import TextIO

from core.config import ImporterConfig
from core.logging_config import get_logger
from core.types import ImportOptions, ImportSummary, LoadResult, SourceFile
from ingest.file_locator import sorted_source_files
from ingest.monthly_parser import read_monthly_file
from store.row_loader import RowLoader, open_row_loader
from transforms.measurement_derivation import derive_measurements
from transforms.row_builder import build_output_rows

_LOGGER = get_logger(__name__)


class ImportPipelineRunner:
    """Runner for one sequential import over a data directory.

    Any error aborts the run; in database mode the open transaction is
    rolled back so no rows from the failing run are persisted.
    """

    def __init__(
        self,
        options: ImportOptions,
        config: ImporterConfig,
        stream: TextIO | None = None,
    ) -> None:
        self._options = options
        self._config = config
        self._stream = stream if stream is not None else sys.stdout

    def run(self) -> ImportSummary:
        """Execute the import and return run totals."""
        source_files = self._discover()
        if not source_files:
            _LOGGER.warning("no_source_files", data_dir=str(self._options.data_dir))
            return ImportSummary(
                file_count=0, row_count=0, inserted_count=0, dry_run=self._options.dry_run
            )
        results: list[LoadResult] = []
        with open_row_loader(self._options, self._config, self._stream) as loader:
            for source_file in source_files:
                results.append(_import_source_file(source_file, loader))
        summary = _build_summary(results, self._options.dry_run)
        _log_import_completion(self._options, summary)
        return summary

    def _discover(self) -> list[SourceFile]:
        source_files = sorted_source_files(self._options.data_dir)
        _LOGGER.info(
            "source_files_discovered",
            data_dir=str(self._options.data_dir),
            file_count=len(source_files),
        )
        return source_files


def run_import(
    options: ImportOptions,
    config: ImporterConfig,
    stream: TextIO | None = None,
) -> ImportSummary:
    """Run the parse-transform-load pipeline over all monthly files.

    Args:
        options: Import request options.
        config: Runtime configuration.
        stream: Dry-run output stream, stdout when omitted.

    Returns:
        Totals for the completed run.

    Raises:
        SolarImportIoError: If the directory or a file cannot be read.
        SolarImportFormatError: If a monthly payload is malformed.
        SolarImportStoreError: If loading into the database fails.
        SolarImportConfigError: If live mode lacks a database URL.
    """
    return ImportPipelineRunner(options, config, stream).run()


def _import_source_file(source_file: SourceFile, loader: RowLoader) -> LoadResult:
    """Parse, derive, build, and load one monthly file."""
    raw_data = read_monthly_file(source_file)
    measurements = derive_measurements(source_file, raw_data)
    rows = build_output_rows(measurements)
    result = loader.load(source_file, rows)
    _LOGGER.info(
        "source_file_loaded",
        file_name=result.file_name,
        row_count=result.row_count,
        inserted_count=result.inserted_count,
    )
    return result


def _build_summary(results: list[LoadResult], dry_run: bool) -> ImportSummary:
    """Aggregate per-file load results."""
    return ImportSummary(
        file_count=len(results),
        row_count=sum(result.row_count for result in results),
        inserted_count=sum(result.inserted_count for result in results),
        dry_run=dry_run,
    )


def _log_import_completion(options: ImportOptions, summary: ImportSummary) -> None:
    """Log run completion with contextual metadata."""
    _LOGGER.info(
        "import_completed",
        data_dir=str(options.data_dir),
        dry_run=summary.dry_run,
        file_count=summary.file_count,
        row_count=summary.row_count,
        inserted_count=summary.inserted_count,
    )
