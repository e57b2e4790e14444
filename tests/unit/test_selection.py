"""Unit tests for selection building."""

from __future__ import annotations

import pytest

from row_list.core.selection import build_selection, coerce_args, is_blank, quote_identifier


class TestIsBlank:
    @pytest.mark.parametrize("value", [None, "", " ", "\t\n"])
    def test_blank(self, value: str | None) -> None:
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["a", " a ", "0"])
    def test_not_blank(self, value: str) -> None:
        assert not is_blank(value)


class TestCoerceArgs:
    def test_none(self) -> None:
        assert coerce_args(None) is None

    def test_sequence_to_text(self) -> None:
        assert coerce_args([1, "a", 2.5]) == ["1", "a", "2.5"]
        assert coerce_args((7,)) == ["7"]

    def test_none_items_stay_none(self) -> None:
        assert coerce_args([None, 1]) == [None, "1"]

    def test_scalar(self) -> None:
        assert coerce_args(5) == ["5"]
        assert coerce_args("abc") == ["abc"]


class TestBuildSelection:
    def test_without_locale_unchanged(self) -> None:
        assert build_selection("name = ?", ["Alice"]) == ("name = ?", ["Alice"])
        assert build_selection(None, None) == (None, None)

    def test_blank_locale_ignored(self) -> None:
        assert build_selection("a = ?", [1], "  ") == ("a = ?", ["1"])

    def test_locale_only(self) -> None:
        assert build_selection(None, None, "en") == ("locale = ?", ["en"])
        assert build_selection("  ", None, "en") == ("locale = ?", ["en"])

    def test_locale_conjoined_and_appended_last(self) -> None:
        sel, args = build_selection("name = ? and age > ?", ["Bob", 3], "cs")
        assert sel == "(name = ? and age > ?) and locale = ?"
        assert args == ["Bob", "3", "cs"]

    def test_locale_restricts_every_or_branch(self) -> None:
        sel, args = build_selection("name = ? OR name = ?", ["Boris", "Alice"], "en")
        assert sel == "(name = ? OR name = ?) and locale = ?"
        assert args == ["Boris", "Alice", "en"]

    def test_caller_args_not_mutated(self) -> None:
        args = ["Bob"]
        build_selection("name = ?", args, "en")
        assert args == ["Bob"]


class TestQuoteIdentifier:
    def test_plain(self) -> None:
        assert quote_identifier("people") == '"people"'

    def test_embedded_quote(self) -> None:
        assert quote_identifier('we"ird') == '"we""ird"'
