"""Shared type aliases for kvforge."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# An already-parsed config table (TOML table, dict literal, ...).
ConfigTable = Mapping[str, Any]
