"""Legacy byte decoding for script files.

Scripts are stored in a Shift-JIS family encoding. Decoding happens once,
up front; the lexer only ever sees text.
"""

from __future__ import annotations

from scriptlex.config import get_lex_config
from scriptlex.errors import DecodeError
from scriptlex.utils.logger import get_logger

logger = get_logger(__name__)


def decode(data: bytes, encoding: str | None = None) -> str:
    """Decode raw script bytes into text.

    Args:
        data: Script bytes
        encoding: Codec override; defaults to the configured encoding

    Returns:
        Decoded text

    Raises:
        DecodeError: If the bytes are not valid in the codec and the
            configured error handler is "strict"
    """
    config = get_lex_config()
    codec = encoding or config.encoding
    logger.debug("Decoding %d bytes as %s", len(data), codec)
    try:
        return bytes(data).decode(codec, config.decode_errors)
    except UnicodeDecodeError as exc:
        raise DecodeError(codec, exc.start, exc.reason) from exc
