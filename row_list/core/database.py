"""SQLite database backend.

Database answers read queries with positioned ResultCursor instances and
keeps the schema at the configured version through overridable
create/upgrade/downgrade hooks, tracked in ``PRAGMA user_version``.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from row_list.core.connection import ConnectionManager, DatabaseConfig
from row_list.core.contract import COLUMN_ID
from row_list.core.cursor import ResultCursor
from row_list.core.exceptions import QueryError, RowListError, SchemaVersionError
from row_list.core.selection import build_selection, coerce_args, is_blank, quote_identifier

logger = logging.getLogger(__name__)


def _build_query(
    table: str,
    columns: Sequence[str] | None,
    selection: str | None,
    group_by: str | None,
    having: str | None,
    order_by: str | None,
) -> str:
    """Assemble a SELECT statement from its clauses."""
    if is_blank(group_by) and not is_blank(having):
        raise ValueError("HAVING clauses are only permitted when using a GROUP BY clause")

    projection = ", ".join(columns) if columns else "*"
    sql = f"SELECT {projection} FROM {table}"
    if not is_blank(selection):
        sql += f" WHERE {selection}"
    if not is_blank(group_by):
        sql += f" GROUP BY {group_by}"
    if not is_blank(having):
        sql += f" HAVING {having}"
    if not is_blank(order_by):
        sql += f" ORDER BY {order_by}"
    return sql


class Database:
    """SQLite database with a versioned schema.

    Subclasses describe their schema by overriding ``on_create`` and
    ``on_upgrade``. The connection is opened on first use; at that point
    the stored schema version is compared with ``config.version`` and the
    matching hook runs inside a single transaction.

    Args:
        config: DatabaseConfig instance.
    """

    def __init__(self, config: DatabaseConfig) -> None:
        self.config = config
        self._connection_manager = ConnectionManager(config, on_open=self._on_connection_open)

    @classmethod
    def from_path(cls, database: str, version: int = 1) -> Database:
        """Create a Database for a file path (or ``:memory:``)."""
        return cls(DatabaseConfig(database=database, version=version))

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def version(self) -> int:
        """The schema version this database expects."""
        return self.config.version

    @property
    def connection_manager(self) -> ConnectionManager:
        return self._connection_manager

    def close(self) -> None:
        """Close the underlying connection."""
        self._connection_manager.close()

    # --- Schema lifecycle ---

    def on_create(self, connection: Any) -> None:
        """Called when the database has no schema yet. Default does nothing."""

    def on_upgrade(self, connection: Any, old_version: int, new_version: int) -> None:
        """Called when the stored schema is older than ``version``."""

    def on_downgrade(self, connection: Any, old_version: int, new_version: int) -> None:
        """Called when the stored schema is newer than ``version``.

        The default refuses to downgrade.
        """
        raise SchemaVersionError(old_version, new_version, "downgrade is not supported")

    def on_open(self, connection: Any) -> None:
        """Called after the schema is at ``version``, on every open."""

    def _on_connection_open(self, connection: Any) -> None:
        adapter = self._connection_manager.adapter
        new_version = self.config.version
        try:
            old_version = int(adapter.execute(connection, "PRAGMA user_version").fetchone()[0])
        except Exception as e:
            # -1: stored version unknown
            raise SchemaVersionError(-1, new_version, f"cannot read stored version: {e}") from e

        if old_version != new_version:
            try:
                adapter.execute(connection, "BEGIN")
                if old_version == 0:
                    logger.info(
                        "Creating schema version %d in %s", new_version, self.config.database
                    )
                    self.on_create(connection)
                elif old_version < new_version:
                    logger.info(
                        "Upgrading schema of %s from %d to %d",
                        self.config.database,
                        old_version,
                        new_version,
                    )
                    self.on_upgrade(connection, old_version, new_version)
                else:
                    self.on_downgrade(connection, old_version, new_version)
                adapter.execute(connection, f"PRAGMA user_version = {int(new_version)}")
                connection.commit()
            except SchemaVersionError:
                connection.rollback()
                raise
            except Exception as e:
                connection.rollback()
                raise SchemaVersionError(old_version, new_version, str(e)) from e

        self.on_open(connection)

    # --- Reading ---

    def raw_query(
        self,
        table: str,
        columns: Sequence[str] | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        group_by: str | None = None,
        having: str | None = None,
        order_by: str | None = None,
    ) -> ResultCursor:
        """Run a read query and return its cursor.

        Raises:
            QueryError: If the statement cannot be built or executed.
        """
        try:
            sql = _build_query(table, columns, selection, group_by, having, order_by)
        except ValueError as e:
            raise QueryError(table, str(e)) from e

        with self._connection_manager.get_connection() as conn:
            try:
                cursor = self._connection_manager.adapter.execute(
                    conn, sql, coerce_args(selection_args)
                )
            except Exception as e:
                raise QueryError(table, str(e)) from e
        return ResultCursor(cursor, table)

    def query(
        self,
        table: str,
        columns: Sequence[str] | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        group_by: str | None = None,
        having: str | None = None,
        order_by: str | None = None,
    ) -> ResultCursor | None:
        """Run a read query. Return its cursor, or None if the query failed.

        Any failure, including opening the database or bringing its schema
        to ``version``, is logged and reported as None. Use ``raw_query``
        to get the failure as an exception instead.
        """
        try:
            return self.raw_query(
                table, columns, selection, selection_args, group_by, having, order_by
            )
        except RowListError as e:
            logger.warning("%s", e)
            return None

    def get_readable_cursor(
        self,
        table: str,
        locale: str | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        *,
        columns: Sequence[str] | None = None,
        group_by: str | None = None,
        having: str | None = None,
        order_by: str | None = None,
    ) -> ResultCursor | None:
        """Return a cursor over ``table``, restricted to ``locale`` if given, or None."""
        sel, args = build_selection(selection, selection_args, locale)
        return self.query(table, columns, sel, args, group_by, having, order_by)

    def get_readable_cursor_by_id(
        self,
        table: str,
        row_id: int,
        locale: str | None = None,
    ) -> ResultCursor | None:
        """Return a cursor over the row of ``table`` with the given id, or None."""
        return self.get_readable_cursor(table, locale, f"{COLUMN_ID} = ?", [row_id])

    def get_writable_cursor(self, table: str) -> ResultCursor:
        """Return a cursor over all rows of ``table``.

        Raises:
            QueryError: If the table cannot be read.
        """
        return self.raw_query(table)

    # --- Statements ---

    def exec_sql(self, sql: str, params: Sequence[Any] | None = None) -> bool:
        """Execute a single statement that returns no data.

        Return True on success. Failures are logged and reported as False.
        """
        with self._connection_manager.get_connection() as conn:
            try:
                self._connection_manager.adapter.execute(conn, sql, params)
                conn.commit()
            except Exception as e:
                logger.warning("Statement failed: %s (%s)", sql, e)
                return False
        return True

    def attach_database(self, name: str, path: str) -> bool:
        """Attach the database file at ``path`` under the schema ``name``."""
        return self.exec_sql(f"ATTACH DATABASE ? AS {quote_identifier(name)}", [path])

    def detach_database(self, name: str) -> bool:
        return self.exec_sql(f"DETACH DATABASE {quote_identifier(name)}")

    def drop_table(self, table: str) -> bool:
        return self.exec_sql(f"DROP TABLE IF EXISTS {quote_identifier(table)}")

    def drop_view(self, view: str) -> bool:
        return self.exec_sql(f"DROP VIEW IF EXISTS {quote_identifier(view)}")

    def clear_table(self, table: str) -> bool:
        """Remove all rows from ``table``."""
        return self.exec_sql(f"DELETE FROM {quote_identifier(table)}")
