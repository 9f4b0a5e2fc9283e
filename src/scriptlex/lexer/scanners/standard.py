"""Top-level scanner mixin: labels, comments, text."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from scriptlex.charsets import (
    COMMENT_PREFIX,
    FUNCTION_PREFIX,
    PARAM_LIST_CLOSE,
    PARAM_LIST_OPEN,
    PARAM_SEPARATOR,
    is_label_character,
    is_text_character,
)
from scriptlex.errors import LexerError, UnexpectedTokenError
from scriptlex.lexer.modes import LexerState
from scriptlex.tokens import Token, TokenType

E = TypeVar("E", bound=LexerError)


class StandardScannerMixin:
    """Mixin providing top-level dispatch.

    Whitespace between tokens is skipped. Stray parentheses are consumed
    without producing a token; a bare "," is an error.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _state: LexerState

    def _peek(self) -> str:
        """Peek at current character. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_while(self, predicate: Callable[[str], bool]) -> int:
        """Find end of run matching predicate. Implemented by Lexer."""
        raise NotImplementedError

    def _skip_whitespace(self) -> None:
        """Skip whitespace. Implemented by Lexer."""
        raise NotImplementedError

    def _commit_to(self, end: int) -> None:
        """Advance cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _save_location(self) -> None:
        """Save current location. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create token. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token_at_current(self, token_type: TokenType, value: str) -> Token:
        """Create zero-width token. Implemented by Lexer."""
        raise NotImplementedError

    def _error(self, error_class: type[E], message: str) -> E:
        """Create located error. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_function_name(self) -> Token:
        """Scan @name. Implemented by FunctionScannerMixin."""
        raise NotImplementedError

    def _scan_standard(self) -> Token:
        """Scan one top-level token.

        Returns:
            The next token, or EOF once the source is exhausted.

        Raises:
            UnexpectedTokenError: On a "," outside of a parameter list.
        """
        while True:
            self._skip_whitespace()
            char = self._peek()
            if not char:
                return self._make_token_at_current(TokenType.EOF, "")
            if is_label_character(char):
                return self._scan_label()
            if char == FUNCTION_PREFIX:
                return self._scan_function_name()
            if char == COMMENT_PREFIX:
                return self._scan_comment()
            if char == PARAM_LIST_OPEN or char == PARAM_LIST_CLOSE:
                # Stray parenthesis outside a call, ignored
                self._commit_to(self._pos + 1)
                continue
            if char == PARAM_SEPARATOR:
                raise self._error(
                    UnexpectedTokenError,
                    f"Unexpected token {TokenType.FUNCTION_PARAM_SEPARATOR.name}",
                )
            return self._scan_text()

    def _scan_label(self) -> Token:
        """Scan a maximal run of label characters."""
        self._save_location()
        start = self._pos
        end = self._scan_while(is_label_character)
        token = self._make_token(TokenType.LABEL, self._source[start:end], start)
        self._commit_to(end)
        self._state = LexerState.STANDARD
        return token

    def _scan_comment(self) -> Token:
        """Scan ";" to end of line.

        The newline is consumed but is not part of the value.
        """
        self._commit_to(self._pos + 1)  # ;
        self._save_location()
        start = self._pos
        end = self._source.find("\n", start)
        if end == -1:
            end = self._source_len
        token = self._make_token(TokenType.COMMENT, self._source[start:end], start)
        self._commit_to(end + 1 if end < self._source_len else end)
        self._state = LexerState.STANDARD
        return token

    def _scan_text(self) -> Token:
        """Scan free text up to a label character, "@" or newline."""
        self._save_location()
        start = self._pos
        end = self._scan_while(is_text_character)
        token = self._make_token(TokenType.TEXT, self._source[start:end], start)
        self._commit_to(end)
        self._state = LexerState.STANDARD
        return token
