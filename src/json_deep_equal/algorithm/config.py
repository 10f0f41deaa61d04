"""DeepEqualConfig and ArrayComparisonMode for comparison configuration.

DeepEqualConfig is a frozen (immutable) dataclass holding the comparison
options.  The defaults reproduce the reference behaviour: arrays are
compared order-insensitively and a null value is distinct from a missing
key.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class ArrayComparisonMode(StrEnum):
    """How to compare two JSON arrays of equal length.

    - UNORDERED: Sort both arrays by canonical JSON text, then compare
                 positionally.  Default.
    - ORDERED:   Compare positionally as given.
    """

    UNORDERED = auto()
    ORDERED = auto()


@dataclass(frozen=True, slots=True)
class DeepEqualConfig:
    """Immutable configuration for a comparison.

    Attributes:
        array_comparison_mode: How equal-length arrays are compared.  Plain
            strings ("ordered", "unordered") are accepted and coerced.
        null_equals_missing: When True, an object entry whose value is None
            is treated as absent, so ``{"x": None}`` equals ``{}``.  Array
            elements are never affected.  Default False.
    """

    array_comparison_mode: ArrayComparisonMode = ArrayComparisonMode.UNORDERED
    null_equals_missing: bool = False

    def __post_init__(self) -> None:
        try:
            mode = ArrayComparisonMode(self.array_comparison_mode)
        except ValueError:
            msg = (
                "array_comparison_mode must be one of "
                f"{[m.value for m in ArrayComparisonMode]}, "
                f"got {self.array_comparison_mode!r}"
            )
            raise ValueError(msg) from None
        # frozen + slots: bypass __setattr__ to store the coerced member
        object.__setattr__(self, "array_comparison_mode", mode)
