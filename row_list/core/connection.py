"""Connection configuration and management.

DatabaseConfig is a Pydantic model for type-safe connection config.
ConnectionManager owns a single lazily opened connection and drives it
through the SyncAdapter protocol.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel, Field

from row_list.core.exceptions import AdapterError, ConnectionError  # noqa: A004

logger = logging.getLogger(__name__)


class DatabaseConfig(BaseModel):
    """Configuration for a database file."""

    driver: str = "sqlite"
    database: str
    version: int = Field(default=1, ge=1)
    timeout: float = 5.0
    extra: dict[str, Any] = {}


# Adapter module mapping: driver name -> (module_path, adapter_class)
_ADAPTER_MAP: dict[str, tuple[str, str]] = {
    "sqlite": ("row_list.adapters.sqlite", "SqliteAdapter"),
}


def _load_adapter(driver: str) -> Any:
    """Load an adapter by driver name."""
    driver_lower = driver.lower()
    if driver_lower not in _ADAPTER_MAP:
        raise AdapterError(f"Unsupported database driver: {driver}")

    module_path, cls_name = _ADAPTER_MAP[driver_lower]
    try:
        module = importlib.import_module(module_path)
        return getattr(module, cls_name)()
    except (ImportError, AttributeError) as e:
        raise AdapterError(f"Failed to load adapter for '{driver}': {e}") from e


class ConnectionManager:
    """Owns one connection, opened on first use.

    Args:
        config: DatabaseConfig instance.
        on_open: Optional callback run once with each freshly opened
            connection, before it is handed out.
    """

    def __init__(
        self,
        config: DatabaseConfig,
        on_open: Callable[[Any], None] | None = None,
    ) -> None:
        self.config = config
        self._adapter = _load_adapter(config.driver)
        self._on_open = on_open
        self._connection: Any = None

    @property
    def adapter(self) -> Any:
        return self._adapter

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def open(self) -> Any:
        """Open the connection if it is not open yet."""
        if self._connection is None:
            try:
                connection = self._adapter.connect(self.config)
            except Exception as e:
                raise ConnectionError(f"Cannot open '{self.config.database}': {e}") from e
            logger.debug("Opened connection to %s", self.config.database)
            if self._on_open is not None:
                try:
                    self._on_open(connection)
                except BaseException:
                    self._adapter.close(connection)
                    raise
            self._connection = connection
        return self._connection

    @contextmanager
    def get_connection(self):  # type: ignore[no-untyped-def]
        """Get the open connection as a context manager."""
        yield self.open()

    def close(self) -> None:
        """Close the connection."""
        if self._connection is not None:
            self._adapter.close(self._connection)
            self._connection = None
            logger.debug("Closed connection to %s", self.config.database)
