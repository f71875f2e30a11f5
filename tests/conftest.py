"""Shared test fixtures for the kvforge test suite."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


# =============================================================================
# Pytest configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-apply markers based on test directory structure."""
    for item in items:
        test_path = str(item.fspath)
        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/e2e/" in test_path:
            item.add_marker(pytest.mark.e2e)


@pytest.fixture(autouse=True)
def _reset_kvforge_logger() -> Iterator[None]:
    """Drop handlers installed by setup_logging so tests stay isolated."""
    yield
    logger = logging.getLogger("kvforge")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


# =============================================================================
# Config tables
# =============================================================================


def param(size: int, cardinality: int = 1000, **extra: Any) -> dict[str, Any]:
    """Build a parameter-spec table."""
    return {"size": size, "cardinality": cardinality, **extra}


@pytest.fixture
def set_workload() -> dict[str, Any]:
    """A SET workload with an 8-char key and a 32-char value."""
    return {"method": "set", "parameter": [param(8), param(32)]}


@pytest.fixture
def evalsha_workload() -> dict[str, Any]:
    """An EVALSHA workload with four parameters."""
    return {
        "method": "evalsha",
        "name": "lua-get",
        "script-body": "return redis.call('get',KEYS[1])",
        "parameter": [param(4), param(8), param(8), param(8)],
    }


@pytest.fixture
def config_table(set_workload: dict[str, Any], evalsha_workload: dict[str, Any]) -> dict[str, Any]:
    """A full config with two workloads on database 3."""
    return {
        "general": {"database": 3},
        "workload": [
            {"name": "reads", "method": "get", "rate": 1000, "parameter": [param(8)]},
            set_workload,
            evalsha_workload,
        ],
    }


CONFIG_TOML = """\
[general]
database = 2

[[workload]]
name = "reads"
method = "get"
rate = 500

[[workload.parameter]]
size = 8
cardinality = 100

[[workload]]
name = "writes"
method = "set"

[[workload.parameter]]
size = 8
cardinality = 100

[[workload.parameter]]
size = 16

[[workload.parameter]]
value = 60
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a valid TOML workload config and return its path."""
    path = tmp_path / "workload.toml"
    path.write_text(CONFIG_TOML)
    return path


@pytest.fixture
def bad_config_file(tmp_path: Path) -> Path:
    """A config whose only workload uses an unknown method."""
    path = tmp_path / "bad.toml"
    path.write_text(
        '[[workload]]\nmethod = "mget"\n\n[[workload.parameter]]\nsize = 4\n',
    )
    return path
