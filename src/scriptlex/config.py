"""ContextVar-based lexing configuration for scriptlex.

Provides context-local configuration using Python's ContextVars (PEP 567).
Only the byte-level entry points and diagnostics read it; the state machine
itself has no options.

Usage:
    from scriptlex.config import LexConfig, lex_config_context
    from scriptlex import lex

    with lex_config_context(LexConfig(encoding="shift_jis")):
        lexer = lex(raw_bytes)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# Windows Shift-JIS superset; the scripts are authored in it
DEFAULT_ENCODING = "cp932"


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexing configuration.

    Attributes:
        encoding: Codec used to decode raw script bytes
        decode_errors: Codec error handler ("strict", "replace", ...)
        log_dropped_characters: Emit a debug record when the character after
            a function name is discarded without being a "("

    """

    encoding: str = DEFAULT_ENCODING
    decode_errors: str = "strict"
    log_dropped_characters: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({"encoding": "shift_jis", "other": 1})
            >>> config.encoding
            'shift_jis'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexing configuration."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexing configuration for current context."""
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(decode_errors="replace")):
        ...     text = decode(b"\\xff")

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "DEFAULT_ENCODING",
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
