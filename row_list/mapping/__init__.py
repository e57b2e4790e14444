"""Mapping layer - rows, row collections, and typed views of rows."""

from __future__ import annotations

from row_list.mapping.collection import RowCollection
from row_list.mapping.model import ModelMapper
from row_list.mapping.protocol import Backend, Mapper, ResultSet
from row_list.mapping.row import Row

__all__ = [
    "Row",
    "RowCollection",
    "ModelMapper",
    "Backend",
    "ResultSet",
    "Mapper",
]
