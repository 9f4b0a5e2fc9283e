"""Token and TokenType definitions for the scriptlex lexer.

The lexer produces a stream of Token objects for a downstream consumer.
Each Token has a type, value, and source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Most consumers only look at type and value.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scriptlex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    TEXT = auto()  # Free text run
    COMMENT = auto()  # ; to end of line
    LABEL = auto()  # [A-Za-z0-9_!]+

    # Function calls: @name(param, param)
    FUNCTION_NAME = auto()
    FUNCTION_PARAM_START = auto()  # (
    FUNCTION_PARAM = auto()
    FUNCTION_PARAM_SEPARATOR = auto()  # ,
    FUNCTION_PARAM_END = auto()  # )

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from source
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _source_file: Optional source file path

    For tokens read from the source, ``source[_start_offset:_end_offset]``
    equals ``value``. Parentheses synthesized for calls written without
    them have a zero-width span at the point they were generated.

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from scriptlex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def is_synthetic(self) -> bool:
        """True when the value is not backed by source text."""
        return self._end_offset - self._start_offset != len(self.value)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
