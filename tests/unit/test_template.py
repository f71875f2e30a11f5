"""Tests for the parameter template engine."""

from __future__ import annotations

import time

import pytest

from kvforge._internal.errors import ConfigError, MalformedParameterError
from kvforge.params.template import ALPHABET, Parameter, extract_parameter, seeded_string

# =========================================================================
# seeded_string
# =========================================================================


class TestSeededString:
    """Tests for the deterministic string source."""

    @pytest.mark.parametrize("size", [1, 7, 64, 1024])
    def test_length(self, size: int) -> None:
        assert len(seeded_string(size, seed=5)) == size

    def test_deterministic(self) -> None:
        """Same (seed, index) always yields the same string."""
        assert seeded_string(16, 3, 42) == seeded_string(16, 3, 42)

    def test_index_changes_value(self) -> None:
        assert seeded_string(16, 3, 1) != seeded_string(16, 3, 2)

    def test_seed_changes_value(self) -> None:
        assert seeded_string(16, 1, 1) != seeded_string(16, 2, 1)

    def test_uses_whole_alphabet(self) -> None:
        assert set(seeded_string(10_000, seed=1)) == set(ALPHABET)

    def test_prefix_stable_across_sizes(self) -> None:
        """A longer value for the same (seed, index) extends the shorter one."""
        assert seeded_string(64, 3, 7).startswith(seeded_string(16, 3, 7))

    def test_cheap_enough_for_hot_path(self) -> None:
        """Regeneration stays well under the per-request budget."""
        param = Parameter(seed=1, size=32, cardinality=1_000_000)
        start = time.monotonic()
        for _ in range(20_000):
            param.regenerate()
        # ~50µs per call would be a regression; typical is a few µs
        assert time.monotonic() - start < 1.0

    def test_alphabet_has_no_delimiters(self) -> None:
        """Generated values never contain spaces or line breaks."""
        value = seeded_string(4096, seed=9)
        assert set(value) <= set(ALPHABET)
        assert " " not in ALPHABET
        assert "\n" not in ALPHABET
        assert "\r" not in ALPHABET


# =========================================================================
# Parameter
# =========================================================================


class TestParameter:
    """Tests for Parameter construction and regeneration."""

    @pytest.mark.parametrize(
        ("seed", "size", "cardinality"),
        [(0, 1, 0), (1, 8, 1000), (7, 32, 1), (99, 250, 5)],
    )
    def test_regenerate_preserves_size(self, seed: int, size: int, cardinality: int) -> None:
        """Every regeneration yields exactly ``size`` characters."""
        param = Parameter(seed, size, cardinality)
        assert len(param.current_value) == size
        for _ in range(50):
            value = param.regenerate()
            assert len(value) == size
            assert param.current_value == value

    def test_cardinality_bounds_distinct_values(self) -> None:
        param = Parameter(seed=1, size=6, cardinality=5)
        values = {param.regenerate() for _ in range(200)}
        assert len(values) <= 5

    def test_cardinality_cycles(self) -> None:
        """The sequence repeats with period ``cardinality``."""
        param = Parameter(seed=2, size=6, cardinality=4)
        first = [param.regenerate() for _ in range(4)]
        second = [param.regenerate() for _ in range(4)]
        assert first == second

    def test_unbounded_cardinality_keeps_changing(self) -> None:
        param = Parameter(seed=1, size=12, cardinality=0)
        values = {param.regenerate() for _ in range(100)}
        assert len(values) == 100

    def test_reproducible_across_instances(self) -> None:
        """Two parameters with the same config produce the same sequence."""
        a = Parameter(seed=11, size=10, cardinality=1000)
        b = Parameter(seed=11, size=10, cardinality=1000)
        assert [a.regenerate() for _ in range(20)] == [b.regenerate() for _ in range(20)]

    def test_regenerate_varies_value(self) -> None:
        param = Parameter(seed=4, size=16, cardinality=1000)
        assert param.regenerate() != param.regenerate()

    def test_regenerate_disabled(self) -> None:
        param = Parameter(seed=4, size=16, cardinality=1000, regenerate=False)
        initial = param.current_value
        assert param.regenerate() == initial
        assert param.regenerate() == initial

    def test_literal_value_is_fixed(self) -> None:
        param = Parameter(seed=0, size=1, value="300")
        assert param.is_literal
        assert param.size == 3
        for _ in range(5):
            assert param.regenerate() == "300"

    def test_clone_is_independent(self) -> None:
        original = Parameter(seed=5, size=8, cardinality=100)
        copy = original.clone()
        copy.regenerate()
        copy.regenerate()
        assert original.current_value != copy.current_value
        # the original continues its own sequence
        assert original.regenerate() == Parameter(5, 8, 100).regenerate()

    @pytest.mark.parametrize("size", [0, -1])
    def test_rejects_unusable_size(self, size: int) -> None:
        with pytest.raises(MalformedParameterError, match="size"):
            Parameter(seed=0, size=size)

    def test_rejects_negative_cardinality(self) -> None:
        with pytest.raises(MalformedParameterError, match="cardinality"):
            Parameter(seed=0, size=4, cardinality=-1)

    def test_rejects_empty_literal(self) -> None:
        with pytest.raises(MalformedParameterError, match="empty"):
            Parameter(seed=0, size=4, value="")


# =========================================================================
# extract_parameter
# =========================================================================


class TestExtractParameter:
    """Tests for parsing parameter-spec tables."""

    def test_defaults(self) -> None:
        param = extract_parameter(3, {})
        assert param.seed == 3
        assert param.size == 1
        assert param.cardinality == 0

    def test_full_spec(self) -> None:
        param = extract_parameter(0, {"seed": 9, "size": 8, "cardinality": 1000})
        assert (param.seed, param.size, param.cardinality) == (9, 8, 1000)

    def test_num_alias(self) -> None:
        assert extract_parameter(0, {"size": 4, "num": 10}).cardinality == 10

    def test_integer_literal(self) -> None:
        param = extract_parameter(2, {"value": 60})
        assert param.current_value == "60"

    def test_rejects_unknown_key(self) -> None:
        with pytest.raises(MalformedParameterError, match="unrecognised") as excinfo:
            extract_parameter(0, {"size": 4, "style": "random"})
        assert excinfo.value.field == "style"

    def test_rejects_size_with_literal(self) -> None:
        with pytest.raises(MalformedParameterError, match="size") as excinfo:
            extract_parameter(0, {"size": 8, "value": "60"})
        assert excinfo.value.field == "size"

    def test_rejects_both_aliases(self) -> None:
        with pytest.raises(MalformedParameterError, match="aliases"):
            extract_parameter(0, {"num": 1, "cardinality": 1})

    @pytest.mark.parametrize(
        "table",
        [{"size": "8"}, {"size": True}, {"seed": 1.5}, {"regenerate": "yes"}, {"value": [1]}],
    )
    def test_rejects_wrong_types(self, table: dict[str, object]) -> None:
        with pytest.raises(MalformedParameterError):
            extract_parameter(0, table)

    def test_errors_are_config_errors(self) -> None:
        with pytest.raises(ConfigError):
            extract_parameter(0, {"size": 0})
