"""JsonComparator: orchestrator for deep JSON equality.

Validates the two top-level arguments, runs key reconciliation from the
root, and wraps the discrepancies in a DiffResult with timing data.

Architecture:
- Validation is a single gate: both arguments must be plain objects,
  otherwise InvalidInputError is raised before any recursion.  Nested
  values are never validated.
- The root object pair is seeded into the ancestor set so that a document
  containing itself is reported as cyclic instead of recursing forever.
- Inputs are never mutated; arrays are canonicalized into copies.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from json_deep_equal.algorithm.config import DeepEqualConfig
from json_deep_equal.algorithm.paths import ROOT
from json_deep_equal.algorithm.predicates import is_plain_object
from json_deep_equal.algorithm.reconcile import reconcile_keys
from json_deep_equal.errors import InvalidInputError
from json_deep_equal.result import DiffResult

__all__ = ["JsonComparator"]

logger = logging.getLogger(__name__)


class JsonComparator:
    """Deep structural and value comparison of two JSON objects.

    Object key order never matters.  Array element order does not matter
    either (unless configured with ``ArrayComparisonMode.ORDERED``): arrays
    are compared after sorting each one by the canonical JSON text of its
    elements.

    Example::

        from json_deep_equal.comparator import JsonComparator

        cmp = JsonComparator()
        cmp.compare({"tags": ["x", "y"]}, {"tags": ["y", "x"]})   # True
        result = cmp.diff({"a": 1, "b": 2}, {"a": 1})
        print(result.paths)                                       # ["b"]
    """

    def __init__(self, config: DeepEqualConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Comparison options.  Defaults to ``DeepEqualConfig()``.
        """
        self._config: DeepEqualConfig = (
            config if config is not None else DeepEqualConfig()
        )

    @property
    def config(self) -> DeepEqualConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, source: Any, target: Any) -> bool:
        """Return True iff ``source`` and ``target`` are deeply equal.

        Raises:
            InvalidInputError: If either argument is not a JSON object.
            CyclicInputError:  If either argument references itself.
        """
        return self.diff(source, target).equal

    def diff(self, source: Any, target: Any) -> DiffResult:
        """Compare two JSON objects and return every discrepancy found.

        Args:
            source: First JSON object.
            target: Second JSON object.

        Returns:
            A ``DiffResult`` with the discrepancies in discovery order.

        Raises:
            InvalidInputError: If either argument is not a JSON object.
            CyclicInputError:  If either argument references itself.
        """
        self._validate(source, target)

        t0 = time.perf_counter()
        discrepancies = reconcile_keys(
            source,
            target,
            ROOT,
            self._config,
            frozenset({(id(source), id(target))}),
        )
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        logger.debug(
            "Compared JSON objects: %d discrepancies in %.3f ms",
            len(discrepancies),
            elapsed_ms,
        )
        return DiffResult(
            discrepancies=tuple(discrepancies),
            computation_time_ms=elapsed_ms,
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(source: Any, target: Any) -> None:
        """Reject top-level arguments that are not plain objects."""
        if not is_plain_object(source):
            raise InvalidInputError("source", source)
        if not is_plain_object(target):
            raise InvalidInputError("target", target)
