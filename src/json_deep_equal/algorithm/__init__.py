"""algorithm subpackage — public API for the deep comparison algorithm.

Provides the recursive comparison routines, their configuration, and the
canonicalization helpers.  Each routine is a pure function that can be
called on its own.

Example::

    from json_deep_equal.algorithm import reconcile_keys

    discrepancies = reconcile_keys({"a": [1, 2]}, {"a": [2, 1], "b": 0})
    # [Discrepancy(path="b", kind="missing_in_source", ...)]
"""

from __future__ import annotations

from json_deep_equal.algorithm.canonical import canonical_text, canonicalize_array
from json_deep_equal.algorithm.config import ArrayComparisonMode, DeepEqualConfig
from json_deep_equal.algorithm.predicates import (
    is_array,
    is_plain_object,
    strict_equal,
)
from json_deep_equal.algorithm.reconcile import (
    compare_arrays,
    dispatch_values,
    reconcile_keys,
)

__all__ = [
    "ArrayComparisonMode",
    "DeepEqualConfig",
    "canonical_text",
    "canonicalize_array",
    "compare_arrays",
    "dispatch_values",
    "is_array",
    "is_plain_object",
    "reconcile_keys",
    "strict_equal",
]
