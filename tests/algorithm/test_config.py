"""Tests for DeepEqualConfig frozen dataclass and ArrayComparisonMode StrEnum.

Covers:
- Default values (mode=UNORDERED, null_equals_missing=False)
- Immutability (FrozenInstanceError on assignment)
- String coercion of array_comparison_mode
- Validation: unknown modes rejected with ValueError
- ArrayComparisonMode has exactly two values: unordered, ordered
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_deep_equal.algorithm.config import ArrayComparisonMode, DeepEqualConfig

# ---------------------------------------------------------------------------
# ArrayComparisonMode
# ---------------------------------------------------------------------------


class TestArrayComparisonMode:
    def test_has_exactly_two_members(self) -> None:
        assert len(list(ArrayComparisonMode)) == 2

    def test_unordered_value(self) -> None:
        assert ArrayComparisonMode.UNORDERED == "unordered"

    def test_ordered_value(self) -> None:
        assert ArrayComparisonMode.ORDERED == "ordered"

    def test_is_str_subclass(self) -> None:
        assert isinstance(ArrayComparisonMode.ORDERED, str)


# ---------------------------------------------------------------------------
# DeepEqualConfig
# ---------------------------------------------------------------------------


class TestDeepEqualConfigDefaults:
    def test_default_mode_is_unordered(self) -> None:
        assert DeepEqualConfig().array_comparison_mode is ArrayComparisonMode.UNORDERED

    def test_default_null_equals_missing_false(self) -> None:
        assert DeepEqualConfig().null_equals_missing is False

    def test_equal_configs_compare_equal(self) -> None:
        assert DeepEqualConfig() == DeepEqualConfig()


class TestDeepEqualConfigImmutability:
    def test_cannot_set_mode(self) -> None:
        config = DeepEqualConfig()
        with pytest.raises(FrozenInstanceError):
            config.array_comparison_mode = ArrayComparisonMode.ORDERED  # type: ignore[misc]

    def test_cannot_set_null_equals_missing(self) -> None:
        config = DeepEqualConfig()
        with pytest.raises(FrozenInstanceError):
            config.null_equals_missing = True  # type: ignore[misc]


class TestDeepEqualConfigValidation:
    def test_string_mode_is_coerced(self) -> None:
        config = DeepEqualConfig(array_comparison_mode="ordered")  # type: ignore[arg-type]
        assert config.array_comparison_mode is ArrayComparisonMode.ORDERED

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(ValueError, match="array_comparison_mode"):
            DeepEqualConfig(array_comparison_mode="auto")  # type: ignore[arg-type]
