"""Positioned result cursor.

Wraps a DB-API cursor in a scrollable, position-based result set. Rows
are fetched from the driver lazily, only as far as the position (or the
row count) requires.
"""

from __future__ import annotations

from typing import Any

from row_list.core.exceptions import CursorClosedError, QueryError


def _to_text(value: Any) -> str | None:
    """Return the text representation of a column value."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


class ResultCursor:
    """Scrollable cursor over the rows of a query result.

    The cursor starts before the first row (position -1). Moving past the
    last row leaves it after the last row (position == count).

    Driver errors raised while fetching rows are wrapped in QueryError.

    Args:
        cursor: A DB-API cursor with ``description``, ``fetchone`` and ``close``.
        source: Table or view the rows come from, used in error messages.
    """

    def __init__(self, cursor: Any, source: str = "result") -> None:
        self._cursor = cursor
        self._source = source
        description = cursor.description or ()
        self._columns: list[str] = [desc[0] for desc in description]
        self._rows: list[tuple[Any, ...]] = []
        self._exhausted = cursor.description is None
        self._position = -1
        self._closed = False

    def __enter__(self) -> ResultCursor:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"position={self._position}"
        return f"ResultCursor(columns={self._columns}, {state})"

    def _check_open(self, action: str) -> None:
        if self._closed:
            raise CursorClosedError(action)

    def _fill_to(self, index: int) -> bool:
        """Fetch rows until ``index`` is buffered. Return whether it exists."""
        while len(self._rows) <= index and not self._exhausted:
            try:
                row = self._cursor.fetchone()
            except Exception as e:
                raise QueryError(self._source, str(e)) from e
            if row is None:
                self._exhausted = True
            else:
                self._rows.append(tuple(row))
        return 0 <= index < len(self._rows)

    # --- Position ---

    @property
    def position(self) -> int:
        """Current position, -1 before the first row."""
        return self._position

    @property
    def count(self) -> int:
        """Number of rows in the result. Scans the rest of the result."""
        self._check_open("count rows")
        while not self._exhausted:
            self._fill_to(len(self._rows))
        return len(self._rows)

    def move_to_position(self, position: int) -> bool:
        """Move to an absolute position. Return whether a row is there."""
        self._check_open("move")
        if position < 0:
            self._position = -1
            return False
        if self._fill_to(position):
            self._position = position
            return True
        self._position = len(self._rows)
        return False

    def move_to_first(self) -> bool:
        return self.move_to_position(0)

    def move_to_next(self) -> bool:
        return self.move_to_position(self._position + 1)

    def is_before_first(self) -> bool:
        return self._position < 0

    def is_after_last(self) -> bool:
        self._check_open("check position")
        return self._position >= 0 and not self._fill_to(self._position)

    # --- Columns ---

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def column_names(self) -> list[str]:
        return list(self._columns)

    def get_column_name(self, index: int) -> str:
        return self._columns[index]

    def get_column_index(self, name: str) -> int:
        """Return the index of column ``name``, or -1."""
        try:
            return self._columns.index(name)
        except ValueError:
            return -1

    def get_string(self, index: int) -> str | None:
        """Return the value of column ``index`` in the current row as text."""
        self._check_open("read value")
        if not self._fill_to(self._position):
            raise IndexError(f"No row at position {self._position}")
        return _to_text(self._rows[self._position][index])

    # --- Lifecycle ---

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the driver cursor. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._rows.clear()
        self._cursor.close()
