"""Structured logging setup for kvforge."""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime

from kvforge._internal.errors import ConfigError

_ROOT_LOGGER = "kvforge"

# LogRecord attributes forwarded into JSON output when set via ``extra=``.
_CONTEXT_KEYS = ("workload", "method", "database")


class _JsonFormatter(logging.Formatter):
    """One-line JSON formatter.

    Emits keys timestamp, level, logger and message, plus any workload
    context (workload, method, database) attached through ``extra``.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON string.

        Args:
            record: The log record to format.

        Returns:
            A single-line JSON string.
        """
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value.

    Raises:
        ConfigError: If *level* is not a known logging level name.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        msg = f"unknown log level: {level!r}"
        raise ConfigError(msg, field="log_level")
    return resolved


def setup_logging(
    level: int | str = logging.INFO,
    *,
    json_format: bool = False,
) -> logging.Logger:
    """Configure and return the ``kvforge`` logger.

    Repeated calls only update the level of the existing handler.

    Args:
        level: Numeric level or level name. Defaults to INFO.
        json_format: Emit one JSON object per line instead of plain text.

    Returns:
        The configured ``kvforge`` logger.
    """
    numeric = resolve_level(level)
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(numeric)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(numeric)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric)
    if json_format:
        formatter: logging.Formatter = _JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Keep kvforge output off the root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child logger, e.g. ``get_logger("session.bootstrap")``."""
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
