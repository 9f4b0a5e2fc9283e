"""Character sets for O(1) classification.

Label characters are ASCII only; everything outside them (including all
non-ASCII text from the legacy encoding) is text.

Usage:
    from scriptlex.charsets import is_label_character

    if is_label_character(char):  # O(1) lookup
        ...
"""

import string

# Characters allowed in labels and function names
LABEL_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_!")

FUNCTION_PREFIX = "@"
COMMENT_PREFIX = ";"
PARAM_LIST_OPEN = "("
PARAM_LIST_CLOSE = ")"
PARAM_SEPARATOR = ","

# Characters (besides whitespace) that end a function parameter
FUNCTION_PARAM_TERMINATORS: frozenset[str] = frozenset(PARAM_SEPARATOR + PARAM_LIST_CLOSE)


def is_label_character(char: str) -> bool:
    """Check if character may appear in a label or function name."""
    return char in LABEL_CHARS


def is_text_character(char: str) -> bool:
    """Check if character continues a text run.

    Only label characters, ``@`` and newline end a text run; punctuation
    such as ``(``, ``)``, ``;`` and ``,`` is swallowed as text.

    """
    return char not in LABEL_CHARS and char != FUNCTION_PREFIX and char != "\n"


def is_whitespace(char: str) -> bool:
    """Check if character is Unicode whitespace."""
    return char.isspace()


def is_param_character(char: str) -> bool:
    """Check if character continues a function parameter."""
    return char not in FUNCTION_PARAM_TERMINATORS and not char.isspace()
