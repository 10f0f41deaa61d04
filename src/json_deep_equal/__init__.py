"""JSON deep equal - order-insensitive structural equality for JSON documents."""

from __future__ import annotations

import logging

from json_deep_equal.algorithm.config import ArrayComparisonMode, DeepEqualConfig
from json_deep_equal.api import compare, diff
from json_deep_equal.comparator import JsonComparator
from json_deep_equal.errors import (
    CyclicInputError,
    InvalidInputError,
    JsonDeepEqualError,
)
from json_deep_equal.result import DiffResult, Discrepancy, DiscrepancyKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayComparisonMode",
    "CyclicInputError",
    "DeepEqualConfig",
    "DiffResult",
    "Discrepancy",
    "DiscrepancyKind",
    "InvalidInputError",
    "JsonComparator",
    "JsonDeepEqualError",
    "compare",
    "diff",
]
