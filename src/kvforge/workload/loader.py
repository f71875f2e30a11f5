"""Workload config file loading via tomllib."""

from __future__ import annotations

import tomllib
from pathlib import Path

from kvforge._internal.errors import ConfigError
from kvforge.workload.extractor import load_config
from kvforge.workload.models import ProtocolSessionConfig


def load_config_file(file_path: str | Path, flush: bool = False) -> ProtocolSessionConfig:
    """Load a session config from a TOML workload file.

    Args:
        file_path: Path to the ``.toml`` config.
        flush: Start the bootstrap sequence with FLUSHALL.

    Returns:
        The session config built by :func:`load_config`.

    Raises:
        ConfigError: If the file does not exist, is not valid TOML, or
            describes an invalid workload.
    """
    path = Path(file_path)

    if not path.is_file():
        msg = f"Config file not found: {path}"
        raise ConfigError(msg)

    try:
        with path.open("rb") as fh:
            table = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Failed to parse config file {path}: {exc}"
        raise ConfigError(msg) from exc

    return load_config(table, flush=flush)
