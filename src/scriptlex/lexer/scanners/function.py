"""Function call scanner mixin.

Handles ``@name(param, param)``. Every call yields FUNCTION_NAME,
FUNCTION_PARAM_START, any parameters and separators, then
FUNCTION_PARAM_END, even when the source omits the parentheses.

Known quirk: the character right after a function name is consumed
whether or not it is "(". In ``@wait。`` the "。" is discarded.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from scriptlex.charsets import (
    PARAM_LIST_CLOSE,
    PARAM_LIST_OPEN,
    PARAM_SEPARATOR,
    is_label_character,
    is_param_character,
)
from scriptlex.errors import LexerError, MalformedFunctionError
from scriptlex.lexer.modes import LexerState
from scriptlex.tokens import Token, TokenType
from scriptlex.utils.logger import get_logger

E = TypeVar("E", bound=LexerError)

logger = get_logger(__name__)


class FunctionScannerMixin:
    """Mixin providing the function name and parameter list states."""

    # These will be set by the Lexer class
    _source: str
    _pos: int
    _lineno: int
    _col: int
    _state: LexerState
    _log_dropped_characters: bool

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
        """Scan "@" and the (possibly empty) function name after it."""
        self._commit_to(self._pos + 1)  # @
        self._save_location()
        start = self._pos
        end = self._scan_while(is_label_character)
        token = self._make_token(TokenType.FUNCTION_NAME, self._source[start:end], start)
        self._commit_to(end)
        self._state = LexerState.FUNCTION_PARAM_START
        return token

    def _scan_function_param_start(self) -> Token:
        """Open the parameter list.

        A real "(" leads into the parameter list. Anything else means the
        call has no parameters: the start token is synthesized, the
        character is dropped, and a synthetic end follows.
        """
        self._save_location()
        char = self._peek()
        if char == PARAM_LIST_OPEN:
            token = self._make_token(TokenType.FUNCTION_PARAM_START, char, self._pos)
            self._commit_to(self._pos + 1)
            self._state = LexerState.FUNCTION_PARAM_LIST
            return token

        token = self._make_token_at_current(TokenType.FUNCTION_PARAM_START, PARAM_LIST_OPEN)
        if char:
            if self._log_dropped_characters:
                logger.debug(
                    "Dropping %r after function name at %d:%d",
                    char,
                    self._lineno,
                    self._col,
                )
            self._commit_to(self._pos + 1)
        self._state = LexerState.FAKE_PARAM_END
        return token

    def _scan_fake_param_end(self) -> Token:
        """Close a call that was written without parentheses."""
        self._state = LexerState.STANDARD
        return self._make_token_at_current(TokenType.FUNCTION_PARAM_END, PARAM_LIST_CLOSE)

    def _scan_function_param_list(self) -> Token:
        """Scan a parameter, or ")" for an empty list.

        Raises:
            MalformedFunctionError: At end of input, or on a "," where a
                parameter was expected.
        """
        self._skip_whitespace()
        self._save_location()
        char = self._peek()
        if not char:
            raise self._error(
                MalformedFunctionError,
                "Malformed function: got end of buffer, expecting ')'",
            )

        start = self._pos
        end = self._scan_while(is_param_character)
        if end > start:
            token = self._make_token(TokenType.FUNCTION_PARAM, self._source[start:end], start)
            self._commit_to(end)
            self._state = LexerState.FUNCTION_PARAM_SEPARATOR_OR_END
            return token

        if char == PARAM_LIST_CLOSE:
            token = self._make_token(TokenType.FUNCTION_PARAM_END, char, start)
            self._commit_to(start + 1)
            self._state = LexerState.STANDARD
            return token

        raise self._error(MalformedFunctionError, "Unexpected token in function parameter list")

    def _scan_function_param_separator_or_end(self) -> Token:
        """Scan the "," or ")" following a parameter.

        Raises:
            MalformedFunctionError: At end of input, or when anything else
                follows the parameter (e.g. ``@f(a b)``).
        """
        self._skip_whitespace()
        self._save_location()
        char = self._peek()
        if not char:
            raise self._error(
                MalformedFunctionError,
                "Malformed function: got end of buffer, expecting ',' or ')'",
            )

        start = self._pos
        if char == PARAM_SEPARATOR:
            token = self._make_token(TokenType.FUNCTION_PARAM_SEPARATOR, char, start)
            self._commit_to(start + 1)
            self._state = LexerState.FUNCTION_PARAM_LIST
            return token
        if char == PARAM_LIST_CLOSE:
            token = self._make_token(TokenType.FUNCTION_PARAM_END, char, start)
            self._commit_to(start + 1)
            self._state = LexerState.STANDARD
            return token

        raise self._error(
            MalformedFunctionError,
            f"Malformed function: got {char!r}, expecting ',' or ')'",
        )
