"""Lexer states.

The state names the routine that produces the *next* token. The lexer
always holds one materialized token plus one of these tags.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerState(Enum):
    """Lexer states.

    - STANDARD: Top level, between tokens
    - FUNCTION_PARAM_START: Just after a function name
    - FAKE_PARAM_END: Call written without parentheses; close it
    - FUNCTION_PARAM_LIST: Inside "(", expecting a parameter or ")"
    - FUNCTION_PARAM_SEPARATOR_OR_END: After a parameter, expecting "," or ")"

    """

    STANDARD = auto()
    FUNCTION_PARAM_START = auto()
    FAKE_PARAM_END = auto()
    FUNCTION_PARAM_LIST = auto()
    FUNCTION_PARAM_SEPARATOR_OR_END = auto()
