"""Response classification for success/error accounting.

Replies are mapped to a three-way :class:`ResponseOutcome`. The reply is
walked far enough to know it is complete and well-formed (header lines
terminated, bulk payloads of the declared length, every multi-bulk
element present), but no payload is extracted.
"""

from __future__ import annotations

import re
from enum import Enum

STATUS = b"+"
ERROR = b"-"
INTEGER = b":"
BULK = b"$"
MULTI_BULK = b"*"

CRLF = b"\r\n"

MAX_DEPTH = 32

_INTEGER_LINE = re.compile(rb"-?[0-9]+")


class ResponseOutcome(Enum):
    """Classification of a single reply."""

    OK = "ok"
    ERROR = "error"
    INVALID = "invalid"


def _parse_int(line: bytes) -> int | None:
    if _INTEGER_LINE.fullmatch(line) is None:
        return None
    return int(line)


def _read_line(raw: bytes, pos: int) -> tuple[bytes, int] | None:
    """Return the line starting at *pos* and the offset after its CRLF."""
    end = raw.find(CRLF, pos)
    if end == -1:
        return None
    return raw[pos:end], end + len(CRLF)


def _walk(raw: bytes, pos: int, depth: int) -> tuple[ResponseOutcome, int] | None:
    """Walk one reply starting at *pos*.

    Returns:
        The reply's outcome and the offset just past it, or None if the
        reply is truncated or malformed.
    """
    indicator = raw[pos : pos + 1]
    header = _read_line(raw, pos + 1)
    if not indicator or header is None:
        return None
    line, pos = header

    if indicator == STATUS:
        return ResponseOutcome.OK, pos
    if indicator == ERROR:
        return ResponseOutcome.ERROR, pos
    if indicator == INTEGER:
        return (ResponseOutcome.OK, pos) if _parse_int(line) is not None else None

    if indicator == BULK:
        length = _parse_int(line)
        if length is None or length < -1:
            return None
        if length == -1:
            # nil reply, a cache miss
            return ResponseOutcome.OK, pos
        end = pos + length
        if raw[end : end + len(CRLF)] != CRLF:
            return None
        return ResponseOutcome.OK, end + len(CRLF)

    if indicator == MULTI_BULK:
        count = _parse_int(line)
        if count is None or count < -1 or depth >= MAX_DEPTH:
            return None
        for _ in range(max(count, 0)):
            element = _walk(raw, pos, depth + 1)
            if element is None:
                return None
            # error elements (e.g. inside EXEC) still make a complete reply
            pos = element[1]
        return ResponseOutcome.OK, pos

    return None


def classify(raw: bytes) -> ResponseOutcome:
    """Classify raw reply bytes.

    Args:
        raw: Exactly one reply as received from the server.

    Returns:
        ``OK`` for complete status, integer, bulk and multi-bulk replies,
        ``ERROR`` for error replies and ``INVALID`` for anything
        undecodable, empty, truncated, followed by trailing bytes or
        otherwise unrecognised.
    """
    try:
        raw.decode("utf-8")
    except UnicodeDecodeError:
        return ResponseOutcome.INVALID

    result = _walk(raw, 0, 0)
    if result is None or result[1] != len(raw):
        return ResponseOutcome.INVALID
    return result[0]


class ResponseParser:
    """Per-session reply parser handed out by the session config."""

    name = "redis"

    def parse(self, raw: bytes) -> ResponseOutcome:
        return classify(raw)
