"""Row object.

A Row is one fetched table row as a flat mapping of column name to text.
Every value is kept in its string representation and interpreted on
demand by the typed accessors, which fall back to a default instead of
raising.
"""

from __future__ import annotations

import re
from typing import Iterator

from row_list.core.contract import COLUMN_ID, NO_ID
from row_list.core.selection import is_blank
from row_list.mapping.protocol import ResultSet

# Decimal integer: optional sign, digits only
_INT_PATTERN = re.compile(r"[+-]?\d+")

# Decimal float, with optional fraction and exponent
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class Row:
    """One table row as column name -> text value.

    Blank values are never stored, so a column present in the row always
    has a non-blank value.

    Subclasses can hook into loading:

    * ``on_item_load(key, value)`` transforms each value before storage;
    * ``on_pre_load()`` runs before loading (default clears the row);
    * ``on_post_load()`` runs after a successful load (default no-op).

    Args:
        origin: Optional row to copy the data from.
    """

    def __init__(self, origin: Row | None = None) -> None:
        self._data: dict[str, str] = {}
        if origin is not None:
            self.obtain(origin)

    def is_empty(self) -> bool:
        """Return True if this row has no data."""
        return not self._data

    def clear(self) -> None:
        """Remove all data from this row."""
        self._data.clear()

    # --- Accessors ---

    def get_string(self, column: str) -> str | None:
        """Return the raw value of ``column``, or None."""
        return self._data.get(column)

    def get_int(self, column: str, default: int = -1) -> int:
        """Return the value of ``column`` as an integer, or ``default``."""
        value = self._data.get(column)
        if is_blank(value) or not _INT_PATTERN.fullmatch(value):  # type: ignore[arg-type]
            return default
        return int(value)  # type: ignore[arg-type]

    def get_long(self, column: str, default: int = -1) -> int:
        """Return the value of ``column`` as an integer, or ``default``.

        Same as ``get_int``; kept for columns declared as 64-bit ids.
        """
        return self.get_int(column, default)

    def get_float(self, column: str, default: float = 0.0) -> float:
        """Return the value of ``column`` as a float, or ``default``."""
        value = self._data.get(column)
        if is_blank(value) or not _FLOAT_PATTERN.fullmatch(value):  # type: ignore[arg-type]
            return default
        return float(value)  # type: ignore[arg-type]

    def get_id(self) -> int:
        """Return the row id, or NO_ID."""
        return self.get_long(COLUMN_ID, NO_ID)

    def has_id(self) -> bool:
        return COLUMN_ID in self._data

    def has_data(self, field: str) -> bool:
        """Return True if ``field`` is stored with a non-blank value."""
        if is_blank(field):
            return False
        return not is_blank(self._data.get(field))

    def to_dict(self) -> dict[str, str]:
        """Return a copy of the row data."""
        return dict(self._data)

    # --- Loading ---

    def put_raw(self, column: str | None, value: str | None) -> bool:
        """Store ``value`` under ``column``. Return False if either is blank."""
        if is_blank(column) or is_blank(value):
            return False
        self._data[column] = value  # type: ignore[index]
        return True

    def on_item_load(self, key: str, value: str | None) -> str | None:
        """Return the value to store for ``key``. Default returns it as is."""
        return value

    def on_pre_load(self) -> None:
        """Called immediately before loading. Default clears the row."""
        self.clear()

    def on_post_load(self) -> None:
        """Called immediately after loading."""

    def load(self, result: ResultSet | None) -> None:
        """Load the current row of ``result``.

        The row stays empty if ``result`` is None or not positioned on a row.
        """
        self.on_pre_load()
        if result is None:
            return
        if result.position < 0 or result.is_after_last():
            return

        for index in range(result.column_count):
            key = result.get_column_name(index)
            value = self.on_item_load(key, result.get_string(index))
            self.put_raw(key, value)
        self.on_post_load()

    def obtain(self, origin: Row | None) -> None:
        """Replace the data of this row with a copy of ``origin``'s data."""
        self.clear()
        if origin is None or origin.is_empty():
            return
        self._data.update(origin._data)

    # --- Dunder ---

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, column: object) -> bool:
        return column in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        if not self._data:
            return f"{type(self).__name__}{{empty}}"
        items = ", ".join(f"{key}={self._data[key]}" for key in sorted(self._data))
        return f"{type(self).__name__}{{{items}}}"
