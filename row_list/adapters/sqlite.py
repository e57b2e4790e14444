"""SQLite adapter (sqlite3 stdlib)."""

from __future__ import annotations

import sqlite3
from typing import Any, Sequence

from row_list.core.connection import DatabaseConfig


class SqliteAdapter:
    """Synchronous SQLite adapter using stdlib sqlite3."""

    @property
    def paramstyle(self) -> str:
        return "qmark"

    def connect(self, config: DatabaseConfig) -> sqlite3.Connection:
        """Open a connection to the configured database file."""
        conn = sqlite3.connect(config.database, timeout=config.timeout, **config.extra)
        if config.database != ":memory:":
            try:
                conn.execute("PRAGMA journal_mode=WAL")
            except Exception:
                conn.close()
                raise
        return conn

    def close(self, connection: sqlite3.Connection) -> None:
        connection.close()

    def execute(
        self,
        connection: sqlite3.Connection,
        sql: str,
        params: Sequence[Any] | None = None,
    ) -> sqlite3.Cursor:
        """Execute SQL and return a cursor."""
        return connection.execute(sql, tuple(params) if params else ())
