"""Inline command encoding: space-delimited tokens, newline-terminated."""

from __future__ import annotations

DELIMITER = " "
TERMINATOR = "\n"


def encode_inline(*tokens: str | int) -> bytes:
    """Render *tokens* as one inline command.

    Tokens are joined with a single space and the line is terminated
    with ``\\n``. Nothing is escaped: tokens containing the delimiter or
    the terminator produce a malformed request.

    Example::

        >>> encode_inline("SET", "key", "value")
        b'SET key value\\n'
    """
    return (DELIMITER.join(str(token) for token in tokens) + TERMINATOR).encode()
