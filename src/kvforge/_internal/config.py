"""Environment settings for kvforge."""

from __future__ import annotations

import os
from dataclasses import dataclass

from kvforge._internal.errors import ConfigError
from kvforge._internal.logging import resolve_level

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class KvForgeSettings:
    """Process-wide defaults picked up from the environment.

    Attributes:
        flush: Whether the bootstrap sequence starts with FLUSHALL.
        log_level: Logging level name for the ``kvforge`` logger.
    """

    flush: bool = False
    log_level: str = "INFO"


def load_settings() -> KvForgeSettings:
    """Load settings from environment variables with defaults.

    Environment variables:
        KVFORGE_FLUSH: Flush all data before each run (default: false).
        KVFORGE_LOG_LEVEL: Logging level name (default: INFO).

    Returns:
        Populated KvForgeSettings instance.

    Raises:
        ConfigError: If an environment variable has an invalid value.
    """
    flush_str = os.environ.get("KVFORGE_FLUSH", "false").strip().lower()
    log_level = os.environ.get("KVFORGE_LOG_LEVEL", "INFO").strip().upper()

    if flush_str in _TRUE_VALUES:
        flush = True
    elif flush_str in _FALSE_VALUES:
        flush = False
    else:
        msg = f"KVFORGE_FLUSH must be a boolean, got: {flush_str!r}"
        raise ConfigError(msg, field="KVFORGE_FLUSH")

    try:
        resolve_level(log_level)
    except ConfigError:
        msg = f"KVFORGE_LOG_LEVEL must be a logging level name, got: {log_level!r}"
        raise ConfigError(msg, field="KVFORGE_LOG_LEVEL") from None

    return KvForgeSettings(flush=flush, log_level=log_level)
