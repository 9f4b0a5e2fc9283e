"""Lazy state-machine lexer for dialogue scripts.

The lexer keeps exactly one materialized token (``front``) and a state tag
naming the routine that produces the next one. Advancing runs the state
machine just far enough to produce that token.

The cursor only moves forward. Every fetch does work proportional to the
token it produces, so a full pass is O(n).

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

from scriptlex.charsets import is_whitespace
from scriptlex.config import get_lex_config
from scriptlex.errors import LexerError
from scriptlex.lexer.modes import LexerState
from scriptlex.lexer.scanners import FunctionScannerMixin, StandardScannerMixin
from scriptlex.tokens import Token, TokenType

E = TypeVar("E", bound=LexerError)


class Lexer(
    FunctionScannerMixin,
    StandardScannerMixin,
):
    """Pull-based token producer with one token of lookahead.

    Usage:
            >>> lexer = Lexer("@wait(30) HELLO")
            >>> [t.value for t in lexer]
            ['wait', '(', '30', ')', 'HELLO']

    Iterating stops before EOF. ``tokenize()`` yields everything including
    the final EOF. Once EOF is reached it repeats on every ``pop_front()``.

    The first token is produced on construction, so errors in it are
    raised by the constructor.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_saved_lineno",
        "_saved_col",
        "_state",
        "_front",
        "_source_file",
        "_log_dropped_characters",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer and produce the first token.

        Args:
            source: Decoded script text
            source_file: Optional source file path for error messages

        Raises:
            LexerError: If the first token is malformed.
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._saved_lineno = 1
        self._saved_col = 1
        self._state = LexerState.STANDARD
        self._source_file = source_file
        self._log_dropped_characters = get_lex_config().log_dropped_characters
        self._front = self._dispatch_state()

    # =========================================================================
    # Stream interface
    # =========================================================================

    @property
    def front(self) -> Token:
        """The current token."""
        return self._front

    @property
    def empty(self) -> bool:
        """True once the current token is EOF."""
        return self._front.type is TokenType.EOF

    @property
    def state(self) -> LexerState:
        """State that will produce the next token."""
        return self._state

    def pop_front(self) -> None:
        """Advance to the next token.

        Raises:
            LexerError: If the next token is malformed.
        """
        self._front = self._dispatch_state()

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self.empty:
            raise StopIteration
        token = self._front
        self.pop_front()
        return token

    def tokenize(self) -> Iterator[Token]:
        """Yield the remaining tokens, ending with exactly one EOF.

        Complexity: O(n) where n = len(source)
        """
        while True:
            token = self._front
            yield token
            if token.type is TokenType.EOF:
                return
            self.pop_front()

    def _dispatch_state(self) -> Token:
        """Run the routine selected by the current state."""
        state = self._state
        if state is LexerState.STANDARD:
            return self._scan_standard()
        if state is LexerState.FUNCTION_PARAM_START:
            return self._scan_function_param_start()
        if state is LexerState.FAKE_PARAM_END:
            return self._scan_fake_param_end()
        if state is LexerState.FUNCTION_PARAM_LIST:
            return self._scan_function_param_list()
        return self._scan_function_param_separator_or_end()

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _scan_while(self, predicate: Callable[[str], bool]) -> int:
        """Find the end of the run of characters matching predicate.

        Does not move the cursor.

        Returns:
            Position of the first non-matching character or end of source.
        """
        source = self._source
        source_len = self._source_len
        pos = self._pos
        while pos < source_len and predicate(source[pos]):
            pos += 1
        return pos

    def _skip_whitespace(self) -> None:
        self._commit_to(self._scan_while(is_whitespace))

    def _commit_to(self, end: int) -> None:
        """Move the cursor forward to end, updating line/column.

        Args:
            end: Position to commit to (never before the cursor).
        """
        if end <= self._pos:
            return

        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)

        self._pos = end

    # =========================================================================
    # Token and error construction
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create a Token spanning value from start_pos at the saved location."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=start_pos,
            _end_offset=start_pos + len(value),
            _source_file=self._source_file,
        )

    def _make_token_at_current(self, token_type: TokenType, value: str) -> Token:
        """Create a zero-width Token at the cursor (EOF, synthetic parens)."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )

    def _error(self, error_class: type[E], message: str) -> E:
        """Create an error located at the cursor."""
        return error_class(
            message,
            lineno=self._lineno,
            col_offset=self._col,
            source_file=self._source_file,
        )
