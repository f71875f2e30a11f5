"""Tests for TOML config file loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from kvforge._internal.errors import ConfigError, UnknownMethodError
from kvforge.codec.generator import generate_message
from kvforge.workload.loader import load_config_file

if TYPE_CHECKING:
    from pathlib import Path


def test_loads_toml(config_file: Path):
    """A TOML file yields the same session config as the parsed table."""
    config = load_config_file(config_file)
    assert [w.name for w in config.workloads] == ["reads", "writes"]
    assert config.workloads[0].rate == 500
    assert config.database_index == 2
    assert config.bootstrap_ops == (b"SELECT 2\n",)


def test_literal_ttl_from_toml(config_file: Path):
    config = load_config_file(config_file)
    message = generate_message(config.workloads[1].command)
    verb, key, value, ex, ttl = message[:-1].split(b" ")
    assert (verb, ex, ttl) == (b"SET", b"EX", b"60")
    assert len(key) == 8
    assert len(value) == 16


def test_flush_flag(config_file: Path):
    config = load_config_file(config_file, flush=True)
    assert config.bootstrap_ops[0] == b"FLUSHALL\n"


def test_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        load_config_file(tmp_path / "nope.toml")


def test_invalid_toml(tmp_path: Path):
    path = tmp_path / "broken.toml"
    path.write_text("[[workload]\nmethod = ")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config_file(path)


def test_invalid_workload(bad_config_file: Path):
    with pytest.raises(UnknownMethodError):
        load_config_file(bad_config_file)
