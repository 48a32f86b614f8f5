"""TimescaleDB row loader.

This module bulk-inserts output rows with insert-if-absent semantics.
Rows whose (bucket, source, measurement) key already exists are
skipped by the database and never updated.
"""

from __future__ import annotations

from typing import Any, Sequence

import psycopg2
from psycopg2.extras import execute_values

from core.constants import CONFLICT_KEY_COLUMNS, OUTPUT_COLUMNS
from core.errors import SolarImportStoreError
from core.logging_config import get_logger
from core.types import LoadResult, OutputRow, SourceFile

_LOGGER = get_logger(__name__)


class TimescaleRowLoader:
    """Conflict-safe loader bound to one open database connection.

    The loader does not commit; transaction scope belongs to the caller
    so a failing run can be rolled back as a whole.
    """

    def __init__(self, connection: Any, table_name: str) -> None:
        self._connection = connection
        self._table_name = table_name
        self._statement = build_insert_statement(table_name)

    def load(self, source_file: SourceFile, rows: Sequence[OutputRow]) -> LoadResult:
        """Insert one file batch as a single bulk statement.

        Args:
            source_file: File the rows were derived from.
            rows: Output rows for the file.

        Returns:
            Submitted and inserted row counts.

        Raises:
            SolarImportStoreError: On connection, transport, or
                non-conflict constraint failures.
        """
        if not rows:
            return LoadResult(file_name=source_file.name, row_count=0, inserted_count=0)
        values = [_row_values(row) for row in rows]
        try:
            with self._connection.cursor() as cursor:
                execute_values(cursor, self._statement, values, page_size=len(values))
                inserted_count = max(cursor.rowcount, 0)
        except psycopg2.Error as error:
            raise SolarImportStoreError(
                f"Failed to load {len(rows)} rows from {source_file.name} "
                f"into {self._table_name}: {error}".rstrip()
            ) from error
        return LoadResult(
            file_name=source_file.name,
            row_count=len(rows),
            inserted_count=inserted_count,
        )


def build_insert_statement(table_name: str) -> str:
    """Build the bulk insert statement for ``execute_values``.

    Args:
        table_name: Validated plain or schema-qualified table name.

    Returns:
        SQL with a single ``VALUES %s`` placeholder.
    """
    columns = ", ".join(OUTPUT_COLUMNS)
    conflict_columns = ", ".join(CONFLICT_KEY_COLUMNS)
    return (
        f"INSERT INTO {table_name} ({columns}) VALUES %s "
        f"ON CONFLICT ({conflict_columns}) DO NOTHING"
    )


def connect_store(db_url: str, connect_timeout: int) -> Any:
    """Open a PostgreSQL connection.

    Args:
        db_url: libpq connection URL or DSN.
        connect_timeout: Connection timeout in seconds.

    Returns:
        Open psycopg2 connection with an implicit transaction.

    Raises:
        SolarImportStoreError: If the connection cannot be established.
    """
    try:
        return psycopg2.connect(db_url, connect_timeout=connect_timeout)
    except psycopg2.Error as error:
        raise SolarImportStoreError(
            f"Failed to connect to PostgreSQL: {error}".rstrip()
            + " Check --db-url and that the server is reachable."
        ) from error


def commit_transaction(connection: Any) -> None:
    """Commit the run transaction.

    Raises:
        SolarImportStoreError: If the commit fails.
    """
    try:
        connection.commit()
    except psycopg2.Error as error:
        raise SolarImportStoreError(f"Failed to commit import transaction: {error}") from error


def rollback_transaction(connection: Any) -> None:
    """Roll back the run transaction after a failure."""
    try:
        connection.rollback()
    except psycopg2.Error as error:
        _LOGGER.warning("rollback_failed", error=str(error))


def _row_values(row: OutputRow) -> tuple[object, ...]:
    """Build the parameter tuple for one row."""
    return (row.bucket, row.source, row.measurement, float(row.value))
