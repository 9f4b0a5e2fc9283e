"""Tests for top-level scanning: labels, comments, text, stray parens."""

from __future__ import annotations

import pytest

from scriptlex.errors import UnexpectedTokenError
from scriptlex.lexer import Lexer
from scriptlex.tokens import TokenType


def _pairs(source: str) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in Lexer(source)]


class TestEmptyInput:
    """Inputs that produce no tokens at all."""

    @pytest.mark.parametrize("source", ["", " ", "\n", "\t \n  \r\n", "　"])
    def test_whitespace_only(self, source: str) -> None:
        lexer = Lexer(source)
        assert lexer.empty
        assert lexer.front.type == TokenType.EOF
        assert list(lexer) == []

    @pytest.mark.parametrize("source", ["(", ")", "()", ")(", " ( ) "])
    def test_stray_parens_are_ignored(self, source: str) -> None:
        assert Lexer(source).empty


class TestLabels:
    """Label scanning."""

    def test_single_label(self) -> None:
        assert _pairs("HELLO_WORLD") == [(TokenType.LABEL, "HELLO_WORLD")]

    def test_label_with_digits_and_bang(self) -> None:
        assert _pairs("scene_01!") == [(TokenType.LABEL, "scene_01!")]

    def test_labels_split_on_whitespace(self) -> None:
        assert _pairs("MIKU  \n RIN") == [
            (TokenType.LABEL, "MIKU"),
            (TokenType.LABEL, "RIN"),
        ]

    def test_label_followed_by_stray_paren(self) -> None:
        assert _pairs("a(b)") == [(TokenType.LABEL, "a"), (TokenType.LABEL, "b")]


class TestComments:
    """Comment scanning."""

    def test_comment(self) -> None:
        assert _pairs(";hello world!") == [(TokenType.COMMENT, "hello world!")]

    def test_empty_comment(self) -> None:
        assert _pairs(";") == [(TokenType.COMMENT, "")]

    def test_comment_stops_at_newline(self) -> None:
        assert _pairs(";note\nMIKU") == [
            (TokenType.COMMENT, "note"),
            (TokenType.LABEL, "MIKU"),
        ]

    def test_comment_swallows_special_characters(self) -> None:
        assert _pairs(";@fun(a, b) , ;") == [(TokenType.COMMENT, "@fun(a, b) , ;")]

    def test_empty_comment_before_newline(self) -> None:
        assert _pairs(";\n;") == [(TokenType.COMMENT, ""), (TokenType.COMMENT, "")]

    def test_comment_keeps_carriage_return(self) -> None:
        assert _pairs(";dos\r\nX") == [(TokenType.COMMENT, "dos\r"), (TokenType.LABEL, "X")]


class TestText:
    """Free text scanning."""

    def test_fullwidth_character(self) -> None:
        assert _pairs("Ｗ") == [(TokenType.TEXT, "Ｗ")]

    def test_japanese_sentence(self) -> None:
        assert _pairs("こんにちは、世界。") == [(TokenType.TEXT, "こんにちは、世界。")]

    def test_text_swallows_punctuation(self) -> None:
        assert _pairs("あ(い),う;え") == [(TokenType.TEXT, "あ(い),う;え")]

    def test_text_keeps_inner_and_trailing_spaces(self) -> None:
        assert _pairs("あ い b") == [(TokenType.TEXT, "あ い "), (TokenType.LABEL, "b")]

    def test_text_stops_at_newline(self) -> None:
        assert _pairs("あ\nい") == [(TokenType.TEXT, "あ"), (TokenType.TEXT, "い")]

    def test_text_stops_at_label_character(self) -> None:
        assert _pairs("「MIKU」") == [
            (TokenType.TEXT, "「"),
            (TokenType.LABEL, "MIKU"),
            (TokenType.TEXT, "」"),
        ]

    def test_text_before_function(self) -> None:
        assert _pairs("👀@fun") == [
            (TokenType.TEXT, "👀"),
            (TokenType.FUNCTION_NAME, "fun"),
            (TokenType.FUNCTION_PARAM_START, "("),
            (TokenType.FUNCTION_PARAM_END, ")"),
        ]

    def test_stray_open_paren_then_text(self) -> None:
        assert _pairs("(あ)") == [(TokenType.TEXT, "あ)")]


class TestTopLevelSeparator:
    """A bare "," outside a call is fatal."""

    def test_comma_alone_raises_on_first_token(self) -> None:
        with pytest.raises(UnexpectedTokenError, match="Unexpected token FUNCTION_PARAM_SEPARATOR"):
            Lexer(",")

    def test_comma_after_label_raises_on_advance(self) -> None:
        lexer = Lexer("MIKU ,")
        assert lexer.front.value == "MIKU"
        with pytest.raises(UnexpectedTokenError):
            lexer.pop_front()

    def test_comma_after_call(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            list(Lexer("@f(a),"))
