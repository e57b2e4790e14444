"""Unit tests for ResultCursor."""

from __future__ import annotations

import sqlite3

import pytest

from row_list.core.cursor import ResultCursor
from row_list.core.exceptions import CursorClosedError, QueryError
from row_list.mapping.row import Row


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE t (_id INTEGER, name TEXT, score REAL, data BLOB)")
    conn.executemany(
        "INSERT INTO t VALUES (?, ?, ?, ?)",
        [(1, "Alice", 1.5, b"\x68\x69"), (2, None, None, None), (3, "Bob", 2.0, None)],
    )
    yield conn
    conn.close()


@pytest.fixture
def cursor(connection: sqlite3.Connection) -> ResultCursor:
    return ResultCursor(connection.execute("SELECT * FROM t ORDER BY _id"))


class TestResultCursorPosition:
    def test_starts_before_first(self, cursor: ResultCursor) -> None:
        assert cursor.position == -1
        assert cursor.is_before_first()

    def test_move_through_rows(self, cursor: ResultCursor) -> None:
        assert cursor.move_to_first()
        assert cursor.position == 0
        assert cursor.move_to_next()
        assert cursor.move_to_next()
        assert cursor.position == 2
        assert not cursor.move_to_next()
        assert cursor.position == 3
        assert cursor.is_after_last()
        assert not cursor.move_to_next()
        assert cursor.position == 3

    def test_count(self, cursor: ResultCursor) -> None:
        cursor.move_to_first()
        assert cursor.count == 3
        assert cursor.position == 0

    def test_move_to_position(self, cursor: ResultCursor) -> None:
        assert cursor.move_to_position(2)
        assert cursor.get_string(1) == "Bob"
        assert cursor.move_to_position(0)
        assert cursor.get_string(1) == "Alice"
        assert not cursor.move_to_position(-5)
        assert cursor.position == -1

    def test_empty_result(self, connection: sqlite3.Connection) -> None:
        cursor = ResultCursor(connection.execute("SELECT * FROM t WHERE _id > 10"))
        assert not cursor.move_to_first()
        assert cursor.count == 0
        assert cursor.column_count == 4


class TestResultCursorValues:
    def test_columns(self, cursor: ResultCursor) -> None:
        assert cursor.column_names == ["_id", "name", "score", "data"]
        assert cursor.get_column_name(1) == "name"
        assert cursor.get_column_index("score") == 2
        assert cursor.get_column_index("missing") == -1

    def test_values_as_text(self, cursor: ResultCursor) -> None:
        cursor.move_to_first()
        assert cursor.get_string(0) == "1"
        assert cursor.get_string(2) == "1.5"
        assert cursor.get_string(3) == "hi"

    def test_null_is_none(self, cursor: ResultCursor) -> None:
        cursor.move_to_position(1)
        assert cursor.get_string(1) is None
        assert cursor.get_string(2) is None

    def test_read_without_row(self, cursor: ResultCursor) -> None:
        with pytest.raises(IndexError):
            cursor.get_string(0)


class TestResultCursorClose:
    def test_close_is_idempotent(self, cursor: ResultCursor) -> None:
        cursor.close()
        cursor.close()
        assert cursor.is_closed

    def test_access_after_close(self, cursor: ResultCursor) -> None:
        cursor.close()
        with pytest.raises(CursorClosedError):
            cursor.move_to_first()
        with pytest.raises(CursorClosedError):
            _ = cursor.count

    def test_context_manager(self, connection: sqlite3.Connection) -> None:
        with ResultCursor(connection.execute("SELECT * FROM t")) as cursor:
            assert cursor.move_to_first()
        assert cursor.is_closed


class TestResultCursorFetching:
    def test_row_load_fetches_only_current_row(
        self, connection: sqlite3.Connection, counting_cursor
    ) -> None:
        driver = counting_cursor(connection.execute("SELECT * FROM t ORDER BY _id"))
        cursor = ResultCursor(driver)
        cursor.move_to_first()

        row = Row()
        row.load(cursor)

        assert row.get_string("name") == "Alice"
        assert driver.fetched == 1
        assert not cursor.is_after_last()

    def test_driver_error_is_wrapped(self, connection: sqlite3.Connection) -> None:
        connection.execute("CREATE TABLE big (x INTEGER)")
        connection.executemany("INSERT INTO big VALUES (?)", [(5,), (-(2**63),)])
        cursor = ResultCursor(connection.execute("SELECT abs(x) FROM big ORDER BY rowid"), "big")

        with pytest.raises(QueryError, match="big"):
            while cursor.move_to_next():
                pass
