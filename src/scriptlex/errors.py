"""Exception classes for scriptlex.

All lexing failures are fatal for the lexer that raised them: the input is
not valid script text and the caller should abort rather than retry.
"""

from __future__ import annotations


class ScriptlexError(Exception):
    """Base exception for all scriptlex errors."""

    pass


class LexerError(ScriptlexError):
    """Error while turning script text into tokens.

    Carries an optional location that is folded into the message.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnexpectedTokenError(LexerError):
    """A parameter separator appeared outside of a function parameter list."""

    pass


class MalformedFunctionError(LexerError):
    """A function parameter list is truncated or contains an invalid fragment."""

    pass


class DecodeError(LexerError):
    """Raw script bytes could not be decoded with the configured codec."""

    def __init__(self, encoding: str, byte_offset: int, reason: str) -> None:
        """Initialize decode error.

        Args:
            encoding: Codec name that failed
            byte_offset: Offset of the first undecodable byte
            reason: Codec's description of the failure
        """
        self.encoding = encoding
        self.byte_offset = byte_offset
        super().__init__(f"Cannot decode script as {encoding} at byte {byte_offset}: {reason}")
