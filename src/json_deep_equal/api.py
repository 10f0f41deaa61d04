"""Public API functions for json-deep-equal.

This module provides the two user-facing functions: compare and diff.  Each
call creates a fresh JsonComparator to guarantee zero global state mutation
between calls.
"""

from __future__ import annotations

from typing import Any

from json_deep_equal.algorithm.config import DeepEqualConfig
from json_deep_equal.comparator import JsonComparator
from json_deep_equal.result import DiffResult

__all__ = ["compare", "diff"]


def compare(
    source: Any,
    target: Any,
    config: DeepEqualConfig | None = None,
) -> bool:
    """Return True if two JSON objects are deeply equal.

    Args:
        source: First JSON object (a mapping at the top level).
        target: Second JSON object.
        config: Comparison options.  Defaults to ``DeepEqualConfig()`` when None.

    Returns:
        True iff the comparison finds zero discrepancies.

    Raises:
        InvalidInputError: If either argument is None, a primitive or an array.
    """
    return JsonComparator(config=config).compare(source, target)


def diff(
    source: Any,
    target: Any,
    config: DeepEqualConfig | None = None,
) -> DiffResult:
    """Compare two JSON objects and return every discrepancy.

    Args:
        source: First JSON object (a mapping at the top level).
        target: Second JSON object.
        config: Comparison options.  Defaults to ``DeepEqualConfig()`` when None.

    Returns:
        A ``DiffResult``; ``result.equal`` is the boolean verdict.

    Raises:
        InvalidInputError: If either argument is None, a primitive or an array.
    """
    return JsonComparator(config=config).diff(source, target)
