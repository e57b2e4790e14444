"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from row_list.core.connection import DatabaseConfig
from row_list.core.database import Database


class FakeResultSet:
    """In-memory positioned result set that records whether it was closed."""

    def __init__(self, columns: list[str], rows: list[list[str | None]]) -> None:
        self.columns = columns
        self.rows = rows
        self.position = -1
        self.closed = False
        self.close_calls = 0

    @property
    def count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def move_to_first(self) -> bool:
        self.position = 0
        return self.position < len(self.rows)

    def move_to_next(self) -> bool:
        self.position = min(self.position + 1, len(self.rows))
        return self.position < len(self.rows)

    def is_after_last(self) -> bool:
        return self.position >= len(self.rows)

    def get_column_name(self, index: int) -> str:
        return self.columns[index]

    def get_string(self, index: int) -> str | None:
        return self.rows[self.position][index]

    def close(self) -> None:
        self.closed = True
        self.close_calls += 1


class CountingCursor:
    """DB-API cursor proxy counting fetchone calls."""

    def __init__(self, cursor: Any) -> None:
        self._cursor = cursor
        self.fetched = 0

    @property
    def description(self) -> Any:
        return self._cursor.description

    def fetchone(self) -> Any:
        self.fetched += 1
        return self._cursor.fetchone()

    def close(self) -> None:
        self._cursor.close()


class FakeBackend:
    """Backend returning queued result sets and recording query calls."""

    def __init__(self, *results: FakeResultSet | None) -> None:
        self.results = list(results)
        self.calls: list[tuple[Any, ...]] = []

    def query(
        self,
        table: str,
        columns: Any = None,
        selection: str | None = None,
        selection_args: Any = None,
        group_by: str | None = None,
        having: str | None = None,
        order_by: str | None = None,
    ) -> FakeResultSet | None:
        self.calls.append((table, columns, selection, selection_args, group_by, having, order_by))
        return self.results.pop(0) if self.results else None


@pytest.fixture
def make_result():
    """Build a FakeResultSet from dict rows sharing the same keys.

    Usage:
        make_result([{"_id": "1", "name": "Alice"}])
    """

    def _make(rows: list[dict[str, str | None]], columns: list[str] | None = None) -> FakeResultSet:
        if columns is None:
            columns = list(rows[0]) if rows else []
        return FakeResultSet(columns, [[row.get(col) for col in columns] for row in rows])

    return _make


@pytest.fixture
def make_backend():
    """Build a FakeBackend serving the given result sets in order."""

    def _make(*results: FakeResultSet | None) -> FakeBackend:
        return FakeBackend(*results)

    return _make


@pytest.fixture
def counting_cursor():
    """Wrap a DB-API cursor so tests can see how many rows were fetched."""
    return CountingCursor


@pytest.fixture
def memory_config() -> DatabaseConfig:
    """SQLite in-memory database config."""
    return DatabaseConfig(database=":memory:")


@pytest.fixture
def people_db(memory_config: DatabaseConfig):
    """In-memory database with a localized ``people`` table."""
    db = Database(memory_config)
    db.exec_sql(
        "CREATE TABLE people (_id INTEGER PRIMARY KEY, name TEXT, age INTEGER, "
        "score REAL, locale TEXT)"
    )
    for row in [
        (1, "Alice", 30, 1.5, "en"),
        (2, "", 41, None, "en"),
        (3, "Bob", None, 2.0, "en"),
        (4, "Boris", 25, 3.25, "ru"),
    ]:
        db.exec_sql("INSERT INTO people VALUES (?, ?, ?, ?, ?)", row)
    yield db
    db.close()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for an on-disk database file."""
    return tmp_path / "rows.db"
