"""Row-to-model mapper.

Turns the text values of a Row into typed objects. Supports dataclasses,
Pydantic models, and plain classes.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar

from pydantic import BaseModel

from row_list.core.exceptions import ColumnMismatchError
from row_list.mapping.row import Row

T = TypeVar("T")


def _is_pydantic_model(cls: type) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    return isinstance(cls, type) and issubclass(cls, BaseModel)


class ModelMapper(Generic[T]):
    """Simple row-to-model mapper.

    Detection order:
    1. Pydantic BaseModel -> model_validate(row), text values coerced to field types
    2. dataclass -> target_class(**row)
    3. Plain class -> target_class(**row)

    Columns missing from the row (blank values are never stored) are
    simply not passed, so the target's defaults apply.

    Args:
        target_class: The class to construct from row data.
        aliases: Optional column-name to field-name mapping.
    """

    def __init__(
        self,
        target_class: type[T],
        aliases: dict[str, str] | None = None,
    ) -> None:
        self._target_class = target_class
        self._aliases = aliases
        self._is_pydantic = _is_pydantic_model(target_class)

    def _apply_aliases(self, data: dict[str, Any]) -> dict[str, Any]:
        """Apply column aliases to the row data."""
        if not self._aliases:
            return data
        return {self._aliases.get(key, key): value for key, value in data.items()}

    def map_one(self, row: Row) -> T:
        """Map a single row to a target_class instance."""
        data = self._apply_aliases(row.to_dict())

        if self._is_pydantic:
            try:
                return self._target_class.model_validate(data)  # type: ignore[attr-defined, no-any-return]
            except Exception as e:
                raise ColumnMismatchError(self._target_class.__name__, [str(e)]) from e

        try:
            return self._target_class(**data)
        except TypeError as e:
            raise ColumnMismatchError(self._target_class.__name__, [str(e)]) from e

    def map_many(self, rows: Iterable[Row]) -> list[T]:
        """Map all rows via map_one."""
        return [self.map_one(row) for row in rows]
