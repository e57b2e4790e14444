"""Database adapter protocol.

Every adapter module MUST implement this protocol so ConnectionManager
can drive it without knowing the driver.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from row_list.core.connection import DatabaseConfig


@runtime_checkable
class SyncAdapter(Protocol):
    """Synchronous database adapter protocol."""

    @property
    def paramstyle(self) -> str:
        """Parameter binding style: 'qmark' (?) for positional placeholders."""
        ...

    def connect(self, config: DatabaseConfig) -> Any:
        """Open a connection."""
        ...

    def close(self, connection: Any) -> None:
        """Close a connection."""
        ...

    def execute(
        self,
        connection: Any,
        sql: str,
        params: Sequence[Any] | None = None,
    ) -> Any:
        """Execute SQL and return a DB-API cursor."""
        ...
