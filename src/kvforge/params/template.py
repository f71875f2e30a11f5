"""Seeded, size-bounded parameter values for workload command slots."""

from __future__ import annotations

import copy
import hashlib
import string
from typing import TYPE_CHECKING

from kvforge._internal.errors import MalformedParameterError

if TYPE_CHECKING:
    from kvforge._internal.types import ConfigTable

# Letters and digits only: generated values never contain the inline
# delimiter (space) or the line terminator.
ALPHABET = string.ascii_letters + string.digits

# Maps every byte value onto the alphabet.
_BYTE_TO_ALPHABET = bytes(ord(ALPHABET[i % len(ALPHABET)]) for i in range(256))

_PARAMETER_KEYS = frozenset({"seed", "size", "cardinality", "num", "regenerate", "value"})


def seeded_string(size: int, seed: int, index: int = 0) -> str:
    """Return the ``index``-th string of length *size* for *seed*.

    The result depends only on its arguments, so every process computes
    the same value for the same ``(seed, index)`` pair. It is one
    SHAKE-128 digest of *size* bytes mapped onto :data:`ALPHABET`, cheap
    enough to run per request.
    """
    digest = hashlib.shake_128(f"{seed}:{index}".encode()).digest(size)
    return digest.translate(_BYTE_TO_ALPHABET).decode("ascii")


class Parameter:
    """A single regenerable value owned by one command slot.

    Each call to :meth:`regenerate` advances a request counter and derives
    a new value from ``(seed, counter % cardinality)``, so the parameter
    cycles through at most *cardinality* distinct values. A cardinality of
    0 leaves the key space unbounded.

    A parameter built with a literal *value* always renders that value.
    This is how fixed numbers such as a TTL are configured.

    Args:
        seed: Seed for the value sequence.
        size: Length of every generated value. Must be >= 1.
        cardinality: Upper bound on distinct values, 0 for unbounded.
        regenerate: If False, the initial value is kept for every request.
        value: Optional literal value; overrides *size*.

    Raises:
        MalformedParameterError: If *size*, *cardinality* or *value* is
            unusable.

    Example::

        key = Parameter(seed=1, size=8, cardinality=1000)
        key.regenerate()
        assert len(key.current_value) == 8
    """

    def __init__(
        self,
        seed: int,
        size: int,
        cardinality: int = 0,
        *,
        regenerate: bool = True,
        value: str | None = None,
    ) -> None:
        if value is not None:
            if not value:
                msg = "parameter value must not be empty"
                raise MalformedParameterError(msg, field="value")
            size = len(value)
        if size < 1:
            msg = f"parameter size must be >= 1, got {size}"
            raise MalformedParameterError(msg, field="size")
        if cardinality < 0:
            msg = f"parameter cardinality must be >= 0, got {cardinality}"
            raise MalformedParameterError(msg, field="cardinality")

        self._seed = seed
        self._size = size
        self._cardinality = cardinality
        self._regenerate = regenerate and value is None
        self._literal = value is not None
        self._counter = 0
        self._value = value if value is not None else seeded_string(size, seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def size(self) -> int:
        return self._size

    @property
    def cardinality(self) -> int:
        return self._cardinality

    @property
    def is_literal(self) -> bool:
        """Return True if this parameter renders a fixed configured value."""
        return self._literal

    @property
    def current_value(self) -> str:
        """Return the most recently generated value."""
        return self._value

    def regenerate(self) -> str:
        """Generate, store and return the next value.

        Literal parameters and parameters configured with
        ``regenerate=False`` keep their value.

        Returns:
            The value now held by this parameter.
        """
        if not self._regenerate:
            return self._value
        self._counter += 1
        index = self._counter % self._cardinality if self._cardinality else self._counter
        self._value = seeded_string(self._size, self._seed, index)
        return self._value

    def clone(self) -> Parameter:
        """Return an independent copy, request counter included."""
        return copy.copy(self)

    def __repr__(self) -> str:
        if self._literal:
            return f"Parameter(value={self._value!r})"
        return (
            f"Parameter(seed={self._seed}, size={self._size}, "
            f"cardinality={self._cardinality}, regenerate={self._regenerate})"
        )


def _int_option(table: ConfigTable, key: str, default: int, index: int) -> int:
    value = table.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"parameter {index}: '{key}' must be an integer, got {value!r}"
        raise MalformedParameterError(msg, field=key)
    return value


def extract_parameter(index: int, table: ConfigTable) -> Parameter:
    """Build a :class:`Parameter` from a parameter-spec table.

    Recognised keys:
        seed: Integer seed, defaults to the parameter's position.
        size: Value length, defaults to 1.
        cardinality: Distinct value bound (``num`` is accepted as an
            alias), defaults to 0 (unbounded).
        regenerate: Whether the value changes per request, defaults to true.
        value: Fixed literal (string or integer), e.g. a TTL. Its length
            is the parameter size, so it cannot be combined with ``size``.

    Args:
        index: Position of the parameter within its workload.
        table: The parsed parameter-spec table.

    Returns:
        A freshly constructed Parameter.

    Raises:
        MalformedParameterError: On an unknown key or a wrongly typed value.
    """
    unknown = sorted(set(table) - _PARAMETER_KEYS)
    if unknown:
        msg = f"parameter {index}: unrecognised option(s): {', '.join(unknown)}"
        raise MalformedParameterError(msg, field=unknown[0])

    if "cardinality" in table and "num" in table:
        msg = f"parameter {index}: 'cardinality' and 'num' are aliases, set only one"
        raise MalformedParameterError(msg, field="num")

    if "value" in table and "size" in table:
        msg = f"parameter {index}: 'size' cannot be set together with a literal 'value'"
        raise MalformedParameterError(msg, field="size")

    seed = _int_option(table, "seed", index, index)
    size = _int_option(table, "size", 1, index)
    cardinality_key = "num" if "num" in table else "cardinality"
    cardinality = _int_option(table, cardinality_key, 0, index)

    regenerate = table.get("regenerate", True)
    if not isinstance(regenerate, bool):
        msg = f"parameter {index}: 'regenerate' must be a boolean, got {regenerate!r}"
        raise MalformedParameterError(msg, field="regenerate")

    literal = table.get("value")
    if literal is not None:
        if isinstance(literal, bool) or not isinstance(literal, (str, int)):
            msg = f"parameter {index}: 'value' must be a string or integer, got {literal!r}"
            raise MalformedParameterError(msg, field="value")
        literal = str(literal)

    return Parameter(seed, size, cardinality, regenerate=regenerate, value=literal)
