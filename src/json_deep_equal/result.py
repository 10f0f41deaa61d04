"""Discrepancy and DiffResult dataclasses for comparison output.

This module provides the record types returned by diff() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["DiffResult", "Discrepancy", "DiscrepancyKind"]


class DiscrepancyKind(StrEnum):
    """The four ways two compared values can diverge.

    - MISSING_IN_TARGET -> "missing_in_target" : key only in the source object
    - MISSING_IN_SOURCE -> "missing_in_source" : key only in the target object
    - LENGTH_MISMATCH   -> "length_mismatch"   : arrays of different lengths
    - VALUE_MISMATCH    -> "value_mismatch"    : unequal primitives or shapes
    """

    MISSING_IN_TARGET = auto()
    MISSING_IN_SOURCE = auto()
    LENGTH_MISMATCH = auto()
    VALUE_MISMATCH = auto()


@dataclass(frozen=True, slots=True)
class Discrepancy:
    """One point of divergence between source and target.

    Attributes:
        path:         Dot-separated path of the divergent location, e.g.
                      "user.interests".  Array elements are addressed by
                      their index after canonical sorting.
        kind:         Which kind of divergence this is (see DiscrepancyKind).
        detail:       Human-readable description.
        source_value: The source value for VALUE_MISMATCH; None otherwise.
        target_value: The target value for VALUE_MISMATCH; None otherwise.
    """

    path: str
    kind: DiscrepancyKind
    detail: str
    source_value: Any = None
    target_value: Any = None

    def __str__(self) -> str:
        return self.detail


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Result of a diff() call.

    Attributes:
        discrepancies:       Every divergence found, in discovery order.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    discrepancies: tuple[Discrepancy, ...]
    computation_time_ms: float

    @property
    def equal(self) -> bool:
        """True iff no discrepancies were found."""
        return not self.discrepancies

    @property
    def paths(self) -> list[str]:
        """Paths of all discrepancies, in discovery order."""
        return [d.path for d in self.discrepancies]
