"""Row collection.

A RowCollection is an ordered list of Row objects loaded from one read
query. Every load replaces the previous contents as a whole.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from contextlib import closing
from typing import Any, Generic, Iterator, Sequence, TypeVar

from row_list.core.exceptions import RowListError
from row_list.core.selection import build_selection
from row_list.mapping.protocol import Backend, ResultSet
from row_list.mapping.row import Row

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Row)


class RowCollection(Generic[R]):
    """Ordered collection of rows populated from a backend query.

    Items are built by ``item_factory``, a zero-argument callable such as
    a Row subclass. A backend bound at construction is used by ``load``;
    ``load_from`` takes the backend explicitly.

    Args:
        item_factory: Builds one empty item per fetched row.
        database: Optional backend bound to this collection.
    """

    def __init__(
        self,
        item_factory: Callable[[], R] = Row,  # type: ignore[assignment]
        database: Backend | None = None,
    ) -> None:
        self._item_factory = item_factory
        self._database = database
        self._items: list[R] = []

    @property
    def database(self) -> Backend | None:
        """The bound backend, or None."""
        return self._database

    def has_database(self) -> bool:
        return self._database is not None

    # --- Sequence ---

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def get_item(self, index: int) -> R:
        """Return the item at ``index``, which must be in ``[0, size)``."""
        self._check_index(index)
        return self._items[index]

    def remove(self, index: int) -> None:
        """Remove the item at ``index``, which must be in ``[0, size)``."""
        self._check_index(index)
        del self._items[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"Index {index} out of range for size {len(self._items)}")

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> R:
        return self.get_item(index)

    def __iter__(self) -> Iterator[R]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._items)})"

    # --- Hooks ---

    def update(self) -> None:
        """Refresh this collection. Default clears it."""
        self.clear()

    def on_item_add(self, item: R | None) -> bool:
        """Return True to keep ``item``. Default keeps every built item."""
        return item is not None

    def _make_item(self) -> R | None:
        try:
            return self._item_factory()
        except Exception:
            logger.warning("Cannot build item with %r", self._item_factory, exc_info=True)
            return None

    # --- Loading ---

    def load_from(
        self,
        database: Backend | None,
        table: str,
        locale: str | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        order_by: str | None = None,
        max_items: int = 0,
    ) -> None:
        """Replace the contents with the rows of ``table`` in ``database``.

        Does nothing if ``database`` is None. A failed query, or a read
        error partway through the result, leaves the collection empty.

        Args:
            database: Backend to query.
            table: Table (or view) to read.
            locale: Optional locale; only rows in this locale are read.
            selection: Optional filter with ``?`` placeholders.
            selection_args: Arguments for the placeholders, in order.
            order_by: Optional ORDER BY text.
            max_items: Maximum number of items to keep; 0 or less means no limit.
        """
        if database is None:
            return
        sel, args = build_selection(selection, selection_args, locale)
        result = database.query(table, None, sel, args, None, None, order_by)
        self.clear()
        if result is None:
            return

        limit = max_items if max_items > 0 else sys.maxsize
        with closing(result):
            try:
                self._fill(result, limit)
            except RowListError as e:
                logger.warning("Cannot read rows of %s: %s", table, e)
                self.clear()
                return
        logger.debug("Loaded %d rows from %s", len(self._items), table)

    def _fill(self, result: ResultSet, limit: int) -> None:
        if not result.move_to_first():
            return
        while True:
            item = self._make_item()
            if item is not None:
                item.load(result)
            if self.on_item_add(item):
                self._items.append(item)  # type: ignore[arg-type]
                if len(self._items) >= limit:
                    return
            if not result.move_to_next():
                return

    def load(
        self,
        table: str,
        locale: str | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        order_by: str | None = None,
        max_items: int = 0,
    ) -> None:
        """Same as ``load_from`` with the bound backend."""
        self.load_from(
            self._database, table, locale, selection, selection_args, order_by, max_items
        )
