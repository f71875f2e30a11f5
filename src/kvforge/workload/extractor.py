"""Build validated workloads and session configs from parsed config tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from kvforge._internal.errors import (
    InvalidArityError,
    MalformedParameterError,
    MissingFieldError,
    MissingScriptBodyError,
    UnknownMethodError,
)
from kvforge._internal.logging import get_logger
from kvforge.commands import (
    Append,
    Decr,
    Del,
    Eval,
    Evalsha,
    Expire,
    Get,
    Hget,
    Hset,
    Incr,
    Prepend,
    Set,
)
from kvforge.params.template import extract_parameter
from kvforge.session.bootstrap import build_bootstrap
from kvforge.workload.models import ProtocolSessionConfig, Workload

if TYPE_CHECKING:
    from collections.abc import Callable

    from kvforge._internal.types import ConfigTable
    from kvforge.commands.base import Command
    from kvforge.params.template import Parameter

logger = get_logger("workload.extractor")

SCRIPT_BODY = "script-body"

# method -> (accepted parameter counts, constructor)
_FIXED_ARITY: dict[str, tuple[frozenset[int], Callable[..., Command]]] = {
    "get": (frozenset({1}), Get),
    "del": (frozenset({1}), Del),
    "incr": (frozenset({1}), Incr),
    "decr": (frozenset({1}), Decr),
    "hget": (frozenset({2}), Hget),
    "expire": (frozenset({2}), Expire),
    "append": (frozenset({2}), Append),
    "prepend": (frozenset({2}), Prepend),
    "set": (frozenset({2, 3}), Set),
    "hset": (frozenset({3}), Hset),
}

_SCRIPT_METHODS = frozenset({"eval", "evalsha"})


def _optional_str(table: ConfigTable, key: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        msg = f"workload '{key}' must be a string, got {value!r}"
        raise MalformedParameterError(msg, field=key)
    return value


def _parse_rate(table: ConfigTable) -> int:
    rate = table.get("rate", 0)
    if isinstance(rate, bool) or not isinstance(rate, int) or rate < 0:
        msg = f"workload 'rate' must be a non-negative integer, got {rate!r}"
        raise MalformedParameterError(msg, field="rate")
    return rate


def _parse_parameters(table: ConfigTable, method: str) -> list[Parameter]:
    specs = table.get("parameter")
    if not isinstance(specs, list):
        msg = f"malformed config: 'parameter' must be an array (method {method})"
        raise MissingFieldError(msg, method=method, field="parameter")

    params: list[Parameter] = []
    for index, spec in enumerate(specs):
        if not isinstance(spec, Mapping):
            msg = f"malformed config: parameter {index} of method {method} must be a table"
            raise MalformedParameterError(msg, method=method, field="parameter")
        params.append(extract_parameter(index, spec))
    return params


def _script_command(method: str, table: ConfigTable, params: list[Parameter]) -> Command:
    body = table.get(SCRIPT_BODY)
    if body is None:
        msg = f"workload.{SCRIPT_BODY} is mandatory for method {method}"
        raise MissingScriptBodyError(msg, method=method, field=SCRIPT_BODY)
    if not isinstance(body, str):
        msg = f"workload.{SCRIPT_BODY} must be a string for method {method}"
        raise MalformedParameterError(msg, method=method, field=SCRIPT_BODY)
    if len(params) < 4 or len(params) % 2:
        msg = f"invalid number of params ({len(params)}) for method {method}"
        raise InvalidArityError(msg, method=method)

    # The first configured parameter is validated but not sent.
    forwarded = params[1:]
    if method == "evalsha":
        return Evalsha.from_body(body, forwarded)
    return Eval(body, forwarded)


def extract_workload(table: ConfigTable) -> Workload:
    """Validate one workload table and build its :class:`Workload`.

    Args:
        table: A parsed ``[[workload]]`` table with ``method``, ``name``,
            ``rate``, ``parameter`` and, for scripts, ``script-body``.

    Returns:
        The workload with a ready-to-clone command template.

    Raises:
        MissingFieldError: If ``parameter`` is missing or not an array.
        MalformedParameterError: If a parameter entry or field is malformed.
        InvalidArityError: If the parameter count does not fit the method.
        MissingScriptBodyError: If an eval/evalsha workload has no script.
        UnknownMethodError: If the method is not supported.
    """
    rate = _parse_rate(table)
    method = _optional_str(table, "method", "get")
    name = _optional_str(table, "name", method)
    params = _parse_parameters(table, method)

    if method in _SCRIPT_METHODS:
        command = _script_command(method, table, params)
    elif method in _FIXED_ARITY:
        arities, build = _FIXED_ARITY[method]
        if len(params) not in arities:
            msg = f"invalid number of params ({len(params)}) for method {method}"
            raise InvalidArityError(msg, method=method)
        command = build(*params)
    else:
        msg = f"invalid command: {method}"
        raise UnknownMethodError(msg, method=method)

    return Workload(name=name, rate=rate, command=command)


def _database_index(table: ConfigTable) -> int:
    general = table.get("general")
    if not isinstance(general, Mapping):
        return 0
    database = general.get("database", 0)
    if isinstance(database, bool) or not isinstance(database, int) or database < 0:
        msg = f"general.database must be a non-negative integer, got {database!r}"
        raise MalformedParameterError(msg, field="general.database")
    return database


def load_config(table: ConfigTable, flush: bool = False) -> ProtocolSessionConfig:
    """Build the session config from a parsed config table.

    Any invalid workload aborts the whole load.

    Args:
        table: Parsed config with ``general.database`` and a ``workload``
            array.
        flush: Start the bootstrap sequence with FLUSHALL.

    Returns:
        The shared, read-only session config.

    Raises:
        MissingFieldError: If no workloads are specified.
        ConfigError: If any workload fails validation.
    """
    database = _database_index(table)

    entries = table.get("workload")
    if not isinstance(entries, list) or not entries:
        msg = "no workloads specified"
        raise MissingFieldError(msg, field="workload")

    workloads: list[Workload] = []
    preload_scripts: list[str] = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            msg = "workload must be table"
            raise MalformedParameterError(msg, field="workload")

        script = entry.get(SCRIPT_BODY)
        if entry.get("method") == "evalsha" and isinstance(script, str):
            preload_scripts.append(script)

        workload = extract_workload(entry)
        workloads.append(workload)
        logger.debug(
            "Loaded workload %s: method=%s, rate=%d, params=%d",
            workload.name,
            workload.method,
            workload.rate,
            len(workload.command.parameters()),
            extra={"workload": workload.name, "method": workload.method},
        )

    ops = build_bootstrap(flush, database, preload_scripts)
    logger.info(
        "Loaded %d workload(s), %d bootstrap op(s), database=%d",
        len(workloads),
        len(ops),
        database,
        extra={"database": database},
    )

    return ProtocolSessionConfig(
        workloads=tuple(workloads),
        bootstrap_ops=tuple(ops),
        database_index=database,
        preload_scripts=tuple(preload_scripts),
        flush=flush,
    )
