"""Tests for canonical_text and canonicalize_array.

Covers:
- Sorted keys and compact separators
- Integral floats render like integers
- numpy values serialize like their native equivalents
- canonicalize_array returns a sorted copy and never mutates its input
- Stable ordering for textually identical elements
- Cycle detection during serialization
"""

from __future__ import annotations

import numpy as np
import pytest

from json_deep_equal.algorithm.canonical import canonical_text, canonicalize_array
from json_deep_equal.errors import CyclicInputError

# ---------------------------------------------------------------------------
# canonical_text
# ---------------------------------------------------------------------------


class TestCanonicalText:
    def test_keys_sorted_compact(self) -> None:
        assert canonical_text({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'

    def test_key_order_irrelevant(self) -> None:
        assert canonical_text({"x": 1, "y": 2}) == canonical_text({"y": 2, "x": 1})

    def test_primitives(self) -> None:
        assert canonical_text(None) == "null"
        assert canonical_text(True) == "true"
        assert canonical_text("s") == '"s"'
        assert canonical_text(1.5) == "1.5"

    def test_integral_float_rendered_as_int(self) -> None:
        assert canonical_text(1.0) == canonical_text(1) == "1"
        assert canonical_text(-0.0) == "0"

    def test_bool_not_rendered_as_int(self) -> None:
        assert canonical_text(True) != canonical_text(1)

    def test_non_ascii_kept(self) -> None:
        assert canonical_text("é") == '"é"'

    def test_tuple_is_array(self) -> None:
        assert canonical_text((1, 2)) == "[1,2]"

    def test_numpy_values(self) -> None:
        assert canonical_text({"a": np.array([1, 2]), "b": np.float64(2.0)}) == (
            '{"a":[1,2],"b":2}'
        )

    def test_non_string_keys(self) -> None:
        assert canonical_text({1: "a"}) == '{"1":"a"}'

    def test_cycle_detected(self) -> None:
        value: list[object] = [1]
        value.append(value)
        with pytest.raises(CyclicInputError) as exc_info:
            canonical_text(value, "items")
        assert exc_info.value.path == "items.1"


# ---------------------------------------------------------------------------
# canonicalize_array
# ---------------------------------------------------------------------------


class TestCanonicalizeArray:
    def test_sorted_by_text(self) -> None:
        assert canonicalize_array([3, 1, 2]) == [1, 2, 3]

    def test_text_order_not_numeric_order(self) -> None:
        # "10" < "9" as text
        assert canonicalize_array([9, 10]) == [10, 9]

    def test_returns_new_list(self) -> None:
        values = [2, 1]
        result = canonicalize_array(values)
        assert result is not values
        assert values == [2, 1]

    def test_mixed_types(self) -> None:
        values = [{"a": 1}, "s", None, 1, [2], True]
        # '"s"' < '1' < '[2]' < 'null' < 'true' < '{"a":1}'
        assert canonicalize_array(values) == ["s", 1, [2], None, True, {"a": 1}]

    def test_stable_for_textually_equal_elements(self) -> None:
        first, second = 1, 1.0
        result = canonicalize_array([second, first])
        assert result[0] is second
        assert result[1] is first

    def test_elements_keep_identity(self) -> None:
        inner = {"k": "v"}
        assert canonicalize_array([inner])[0] is inner

    def test_numpy_array_input(self) -> None:
        assert canonicalize_array(np.array([3, 1, 2])) == [1, 2, 3]

    def test_empty(self) -> None:
        assert canonicalize_array([]) == []
