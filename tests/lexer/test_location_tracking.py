"""Tests for token and error source locations."""

from __future__ import annotations

import pytest

from scriptlex.errors import MalformedFunctionError, UnexpectedTokenError
from scriptlex.lexer import Lexer
from scriptlex.tokens import TokenType


def _positions(source: str) -> list[tuple[str, int, int]]:
    return [(t.value, t.lineno, t.col) for t in Lexer(source).tokenize()]


class TestTokenLocations:
    """Line/column of each token's value."""

    def test_labels_across_lines(self) -> None:
        assert _positions("A\n  B") == [("A", 1, 1), ("B", 2, 3), ("", 2, 4)]

    def test_comment_location_is_after_marker(self) -> None:
        assert _positions(";note\nX") == [("note", 1, 2), ("X", 2, 1), ("", 2, 2)]

    def test_function_tokens(self) -> None:
        assert _positions("@f( a )") == [
            ("f", 1, 2),
            ("(", 1, 3),
            ("a", 1, 5),
            (")", 1, 7),
            ("", 1, 8),
        ]

    def test_synthetic_parens_sit_at_cursor(self) -> None:
        tokens = list(Lexer("@f\nX").tokenize())
        start, end = tokens[1], tokens[2]
        assert start.is_synthetic and end.is_synthetic
        assert (start.lineno, start.col) == (1, 3)
        # The dropped newline has been consumed by then
        assert (end.lineno, end.col) == (2, 1)
        assert tokens[3].value == "X"
        assert (tokens[3].lineno, tokens[3].col) == (2, 1)

    def test_multibyte_text_counts_code_points(self) -> None:
        assert _positions("あいう MIKU") == [("あいう ", 1, 1), ("MIKU", 1, 5), ("", 1, 9)]

    def test_location_object(self) -> None:
        lexer = Lexer("\n  MIKU", source_file="scene01.txt")
        loc = lexer.front.location
        assert str(loc) == "scene01.txt:2:3"
        assert loc.offset == 3
        assert loc.end_offset == 7
        assert loc.length == 4

    def test_location_is_cached(self) -> None:
        token = Lexer("MIKU").front
        assert token.location is token.location

    def test_real_param_start_is_not_synthetic(self) -> None:
        tokens = list(Lexer("@f()").tokenize())
        assert tokens[1].type == TokenType.FUNCTION_PARAM_START
        assert not tokens[1].is_synthetic
        assert not tokens[2].is_synthetic


class TestErrorLocations:
    """Errors point at the cursor where lexing stopped."""

    def test_bare_separator(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            Lexer("\n  ,")
        assert (exc_info.value.lineno, exc_info.value.col_offset) == (2, 3)
        assert str(exc_info.value) == "2:3 Unexpected token FUNCTION_PARAM_SEPARATOR"

    def test_truncated_call(self) -> None:
        with pytest.raises(MalformedFunctionError) as exc_info:
            list(Lexer("@f(a,"))
        err = exc_info.value
        assert (err.lineno, err.col_offset) == (1, 6)
        assert err.message == "Malformed function: got end of buffer, expecting ')'"

    def test_source_file_in_message(self) -> None:
        with pytest.raises(MalformedFunctionError) as exc_info:
            list(Lexer("@f(a", source_file="scene01.txt"))
        assert str(exc_info.value) == (
            "scene01.txt:1:5 Malformed function: got end of buffer, expecting ',' or ')'"
        )
