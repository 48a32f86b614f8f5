"""Row loader selection and transaction scope.

This module picks the dry-run or database loader for an import run.
Database runs share one transaction that is rolled back on failure.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Protocol, Sequence, TextIO

from core.config import ImporterConfig, validate_table_name
from core.errors import SolarImportConfigError
from core.logging_config import get_logger
from core.types import ImportOptions, LoadResult, OutputRow, SourceFile
from store.dry_run_loader import DryRunRowLoader
from store.timescale_loader import (
    TimescaleRowLoader,
    commit_transaction,
    connect_store,
    rollback_transaction,
)

_LOGGER = get_logger(__name__)


class RowLoader(Protocol):
    """Sink accepting one batch of rows per source file."""

    def load(self, source_file: SourceFile, rows: Sequence[OutputRow]) -> LoadResult:
        """Load a batch and report counts."""


@contextmanager
def open_row_loader(
    options: ImportOptions,
    config: ImporterConfig,
    stream: TextIO,
) -> Iterator[RowLoader]:
    """Open the loader matching the run mode.

    Dry-run never connects, even when a database URL is configured.

    Args:
        options: Import request options.
        config: Runtime configuration.
        stream: Output stream for dry-run rendering.

    Yields:
        A row loader valid for the duration of the run.

    Raises:
        SolarImportConfigError: If live mode has no database URL.
        SolarImportStoreError: If connecting or committing fails.
    """
    if options.dry_run:
        yield DryRunRowLoader(stream)
        return
    db_url = options.db_url or config.db_url
    if not db_url:
        raise SolarImportConfigError(
            "--db-url is required unless --dry-run is set. "
            "Pass --db-url or set DATABASE_URL."
        )
    table_name = validate_table_name(options.table_name or config.table_name)
    connection = connect_store(db_url, config.connect_timeout)
    _LOGGER.debug("store_connected", table_name=table_name)
    try:
        yield TimescaleRowLoader(connection, table_name)
        commit_transaction(connection)
    except Exception:
        rollback_transaction(connection)
        raise
    finally:
        connection.close()
