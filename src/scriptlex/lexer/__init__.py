"""State-machine lexer for dialogue scripts.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerState
├── core.py              # Lexer class (cursor, token buffer, state dispatch)
├── modes.py             # LexerState enum
└── scanners/            # State-specific scanners
    ├── standard.py      # Top level: labels, comments, text
    └── function.py      # @name(param, ...) calls

Usage:
    >>> from scriptlex.lexer import Lexer
    >>> for token in Lexer("NAME ;note").tokenize():
    ...     print(token)
Token(LABEL, 'NAME', 1:1)
Token(COMMENT, 'note', 1:7)
Token(EOF, '', 1:11)

"""

from scriptlex.lexer.core import Lexer
from scriptlex.lexer.modes import LexerState

__all__ = ["Lexer", "LexerState"]
