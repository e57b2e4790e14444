"""Mapping protocols.

ResultSet is what a Row loads from, Backend is what a RowCollection
queries, Mapper turns a loaded Row into a typed object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Protocol, Sequence, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from row_list.mapping.row import Row

T = TypeVar("T")


@runtime_checkable
class ResultSet(Protocol):
    """A positioned, scrollable result of a read query."""

    @property
    def position(self) -> int:
        """Current position, -1 before the first row."""
        ...

    @property
    def count(self) -> int:
        """Total number of rows."""
        ...

    @property
    def column_count(self) -> int:
        ...

    def move_to_first(self) -> bool:
        ...

    def move_to_next(self) -> bool:
        ...

    def is_after_last(self) -> bool:
        """Return True if the position is past the last row, without counting rows."""
        ...

    def get_column_name(self, index: int) -> str:
        ...

    def get_string(self, index: int) -> str | None:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class Backend(Protocol):
    """A tabular data source answering read queries."""

    def query(
        self,
        table: str,
        columns: Sequence[str] | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        group_by: str | None = None,
        having: str | None = None,
        order_by: str | None = None,
    ) -> ResultSet | None:
        """Run a read query. Return None if it failed."""
        ...


class Mapper(Protocol[T]):
    """Base mapper protocol."""

    def map_one(self, row: Row) -> T:
        """Map a single row to a target object."""
        ...

    def map_many(self, rows: Iterable[Row]) -> list[T]:
        """Map multiple rows to a list of target objects."""
        ...
