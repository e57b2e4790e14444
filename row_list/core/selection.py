"""Selection building.

Builds the ``WHERE`` text and its positional ``?`` arguments for read
queries, including the locale restriction used by localized tables.
"""

from __future__ import annotations

from typing import Any, Sequence

from row_list.core.contract import LocaleTable


def is_blank(value: str | None) -> bool:
    """Return True for ``None``, the empty string, or whitespace-only text."""
    return value is None or not value.strip()


def coerce_args(args: Sequence[Any] | Any | None) -> list[str | None] | None:
    """Normalize selection arguments to a list of text values.

    * ``None`` -> ``None`` (no arguments).
    * ``tuple`` / ``list`` -> list with every item converted to ``str``;
      ``None`` items stay ``None`` so they bind as SQL NULL.
    * Any other scalar -> single-element list.
    """
    if args is None:
        return None
    if isinstance(args, (tuple, list)):
        return [None if arg is None else str(arg) for arg in args]
    return [str(args)]


def build_selection(
    selection: str | None,
    selection_args: Sequence[Any] | None,
    locale: str | None = None,
) -> tuple[str | None, list[str | None] | None]:
    """Return ``(selection, selection_args)`` with the locale restriction applied.

    Without a locale both values are returned unchanged (arguments
    normalized to text). With a locale, ``locale = ?`` is conjoined onto
    the parenthesized caller's selection, so it restricts every branch of
    an ``OR``. The locale is appended as the last argument, so placeholders
    and arguments keep their positions.

    Args:
        selection: Optional filter text with ``?`` placeholders.
        selection_args: Arguments matching the placeholders, in order.
        locale: Optional locale code to restrict the rows to.

    Returns:
        The effective selection and its arguments.
    """
    args = coerce_args(selection_args)
    if is_blank(locale):
        return selection, args

    restriction = f"{LocaleTable.COLUMN_LOCALE} = ?"
    if is_blank(selection):
        sel = restriction
    else:
        sel = f"({selection}) and {restriction}"
    return sel, [*(args or []), locale]


def quote_identifier(name: str) -> str:
    """Quote a table, view, or schema name for use in generated DDL."""
    return '"' + name.replace('"', '""') + '"'
