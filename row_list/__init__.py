"""row-list - map query result rows onto flat, text-valued row objects."""

from __future__ import annotations

from row_list.core.connection import ConnectionManager, DatabaseConfig
from row_list.core.contract import COLUMN_ID, NO_ID
from row_list.core.cursor import ResultCursor
from row_list.core.database import Database
from row_list.core.exceptions import (
    AdapterError,
    ColumnMismatchError,
    ConnectionError,  # noqa: A004
    CursorClosedError,
    ExecutionError,
    MappingError,
    QueryError,
    RowListError,
    SchemaError,
    SchemaVersionError,
)
from row_list.core.selection import build_selection
from row_list.mapping.collection import RowCollection
from row_list.mapping.model import ModelMapper
from row_list.mapping.row import Row

__all__ = [
    # Connection
    "DatabaseConfig",
    "ConnectionManager",
    # Database
    "Database",
    "ResultCursor",
    "build_selection",
    # Contract
    "COLUMN_ID",
    "NO_ID",
    # Mapping
    "Row",
    "RowCollection",
    "ModelMapper",
    # Exceptions
    "RowListError",
    "ExecutionError",
    "QueryError",
    "CursorClosedError",
    "SchemaError",
    "SchemaVersionError",
    "MappingError",
    "ColumnMismatchError",
    "AdapterError",
    "ConnectionError",
]
