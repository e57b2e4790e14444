"""row-list exception hierarchy.

All exceptions are row-list specific. Raw sqlite3 exceptions are wrapped
before they reach callers.
"""

from __future__ import annotations


class RowListError(Exception):
    """Base exception for all row-list errors."""


# --- Execution ---


class ExecutionError(RowListError):
    """Base for statement execution errors."""


class QueryError(ExecutionError):
    """Raised when a read query against a table fails."""

    def __init__(self, table: str, detail: str) -> None:
        self.table = table
        super().__init__(f"Query on '{table}' failed: {detail}")


class CursorClosedError(ExecutionError):
    """Raised when a closed result cursor is accessed."""

    def __init__(self, attempted_action: str) -> None:
        self.attempted_action = attempted_action
        super().__init__(f"Cannot {attempted_action}: cursor is closed")


# --- Schema ---


class SchemaError(RowListError):
    """Base for schema lifecycle errors."""


class SchemaVersionError(SchemaError):
    """Raised when the stored schema version cannot be brought to the expected one."""

    def __init__(self, old_version: int, new_version: int, detail: str) -> None:
        self.old_version = old_version
        self.new_version = new_version
        super().__init__(
            f"Cannot move schema from version {old_version} to {new_version}: {detail}"
        )


# --- Mapping ---


class MappingError(RowListError):
    """Base for mapping errors."""


class ColumnMismatchError(MappingError):
    """Raised when required fields cannot be mapped from row columns."""

    def __init__(self, target_class: str, missing_fields: list[str]) -> None:
        self.target_class = target_class
        self.missing_fields = missing_fields
        super().__init__(f"Cannot map to {target_class}: missing fields {missing_fields}")


# --- Adapter ---


class AdapterError(RowListError):
    """Base for adapter errors."""


class ConnectionError(AdapterError):  # noqa: A001
    """Raised on connection failures."""
