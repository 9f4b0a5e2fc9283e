"""
scriptlex — Lexer for Shift-JIS dialogue scripts

Turns script text (labels, ``@name(param, ...)`` calls, ``;`` comments and
free text) into a typed token stream for an interpreter or compiler.

Quick Start:
    >>> from scriptlex import lex_text
    >>> [(t.type.name, t.value) for t in lex_text("@face(smile) MIKU")]
    [('FUNCTION_NAME', 'face'), ('FUNCTION_PARAM_START', '('), ('FUNCTION_PARAM', 'smile'), ('FUNCTION_PARAM_END', ')'), ('LABEL', 'MIKU')]

    >>> # Straight from script bytes
    >>> from scriptlex import lex
    >>> lexer = lex(open("scene01.txt", "rb").read(), source_file="scene01.txt")
"""

from __future__ import annotations

from scriptlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from scriptlex.decoding import decode
from scriptlex.errors import (
    DecodeError,
    LexerError,
    MalformedFunctionError,
    ScriptlexError,
    UnexpectedTokenError,
)
from scriptlex.lexer import Lexer, LexerState
from scriptlex.location import SourceLocation
from scriptlex.tokens import Token, TokenType

__version__ = "0.1.0"


def lex(data: bytes, source_file: str | None = None) -> Lexer:
    """Decode script bytes and create a lexer over them.

    Args:
        data: Script bytes in the configured legacy encoding
        source_file: Optional source file path for error messages

    Returns:
        Lexer positioned on the first token

    Raises:
        DecodeError: If the bytes cannot be decoded
        LexerError: If the first token is malformed
    """
    return Lexer(decode(data), source_file=source_file)


def lex_text(text: str, source_file: str | None = None) -> Lexer:
    """Create a lexer over already-decoded text."""
    return Lexer(text, source_file=source_file)


def tokenize(text: str, source_file: str | None = None) -> list[Token]:
    """Tokenize text completely.

    Returns:
        All tokens, ending with EOF
    """
    return list(Lexer(text, source_file=source_file).tokenize())


__all__ = [
    "DecodeError",
    "LexConfig",
    "Lexer",
    "LexerError",
    "LexerState",
    "MalformedFunctionError",
    "ScriptlexError",
    "SourceLocation",
    "Token",
    "TokenType",
    "UnexpectedTokenError",
    "__version__",
    "decode",
    "get_lex_config",
    "lex",
    "lex_config_context",
    "lex_text",
    "reset_lex_config",
    "set_lex_config",
    "tokenize",
]
