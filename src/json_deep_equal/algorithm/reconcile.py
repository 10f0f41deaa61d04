"""Recursive deep comparison: key reconciliation, value dispatch, arrays.

Architecture:
- reconcile_keys:  Union of both key sets.  Keys on one side only are
                   reported as missing; shared keys go to dispatch_values.
- dispatch_values: Routes a value pair by shape.  Array/array pairs go to
                   compare_arrays, object/object pairs back to
                   reconcile_keys, everything else to strict_equal.
- compare_arrays:  Length check, then canonical sort of both sides (or
                   none in ORDERED mode) and index-keyed reconciliation.

All three are pure functions: state travels in parameters and each call
returns the discrepancies found below it.  ``ancestors`` holds the
``(id(source), id(target))`` pairs of the object and array pairs currently
being compared; meeting a pair again means the comparison would never finish.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from json_deep_equal.algorithm.canonical import canonicalize_array
from json_deep_equal.algorithm.config import ArrayComparisonMode, DeepEqualConfig
from json_deep_equal.algorithm.paths import ROOT, join_path
from json_deep_equal.algorithm.predicates import is_array, is_plain_object, strict_equal
from json_deep_equal.errors import CyclicInputError
from json_deep_equal.result import Discrepancy, DiscrepancyKind

__all__ = ["compare_arrays", "dispatch_values", "reconcile_keys"]

_DEFAULT_CONFIG = DeepEqualConfig()

Ancestors = frozenset[tuple[int, int]]


def reconcile_keys(
    source: Mapping[Any, Any],
    target: Mapping[Any, Any],
    path: str = ROOT,
    config: DeepEqualConfig | None = None,
    ancestors: Ancestors = frozenset(),
) -> list[Discrepancy]:
    """Compare the key spaces of two objects and recurse into shared keys.

    Args:
        source:    Source object.
        target:    Target object.
        path:      Path of the object pair.  Defaults to "" (root).
        config:    Comparison options.  Defaults to ``DeepEqualConfig()``.
        ancestors: Object and array pairs enclosing this one.

    Returns:
        Discrepancies for this object pair and everything below it.
        Source keys are visited in source order, then target-only keys in
        target order.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG
    return _reconcile_entries(
        source, target, path, cfg, ancestors, skip_nulls=cfg.null_equals_missing
    )


def dispatch_values(
    source_value: Any,
    target_value: Any,
    path: str,
    config: DeepEqualConfig | None = None,
    ancestors: Ancestors = frozenset(),
) -> list[Discrepancy]:
    """Classify a value pair and route it to the matching comparison.

    Shape mismatches (object vs array vs primitive) fall through to the
    strict-equality branch and are reported as VALUE_MISMATCH.

    Raises:
        CyclicInputError: If the object or array pair is already being compared
            further up the stack.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG

    if is_array(source_value) and is_array(target_value):
        return compare_arrays(source_value, target_value, path, cfg, ancestors)

    if is_plain_object(source_value) and is_plain_object(target_value):
        pair = (id(source_value), id(target_value))
        if pair in ancestors:
            raise CyclicInputError(path)
        return reconcile_keys(
            source_value, target_value, path, cfg, ancestors | {pair}
        )

    if strict_equal(source_value, target_value):
        return []
    return [
        Discrepancy(
            path=path,
            kind=DiscrepancyKind.VALUE_MISMATCH,
            detail=f"Different values at {path}: {source_value!r} vs {target_value!r}",
            source_value=source_value,
            target_value=target_value,
        )
    ]


def compare_arrays(
    source: Any,
    target: Any,
    path: str,
    config: DeepEqualConfig | None = None,
    ancestors: Ancestors = frozenset(),
) -> list[Discrepancy]:
    """Compare two arrays, ignoring element order by default.

    Arrays of different lengths produce exactly one LENGTH_MISMATCH and no
    per-element discrepancies.  Otherwise both arrays are sorted into new
    lists by canonical JSON text (UNORDERED) or left as given (ORDERED),
    then reconciled as objects keyed by index.

    Args:
        source: Source array (list, tuple or numpy array).
        target: Target array.
        path:   Path of the array pair.
        config: Comparison options.  Defaults to ``DeepEqualConfig()``.
        ancestors: Object and array pairs enclosing this array pair.

    Returns:
        Discrepancies for this array pair and everything below it.

    Raises:
        CyclicInputError: If the array pair is already being compared
            further up the stack.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG

    pair = (id(source), id(target))
    if pair in ancestors:
        raise CyclicInputError(path)

    if len(source) != len(target):
        return [
            Discrepancy(
                path=path,
                kind=DiscrepancyKind.LENGTH_MISMATCH,
                detail=(
                    f"Different array lengths at {path}: "
                    f"{len(source)} vs {len(target)}"
                ),
            )
        ]

    if cfg.array_comparison_mode == ArrayComparisonMode.UNORDERED:
        source_items = canonicalize_array(source, path)
        target_items = canonicalize_array(target, path)
    else:
        source_items = list(source)
        target_items = list(target)

    # Array elements are always compared, even when null_equals_missing is set
    return _reconcile_entries(
        dict(enumerate(source_items)),
        dict(enumerate(target_items)),
        path,
        cfg,
        ancestors | {pair},
        skip_nulls=False,
    )


def _reconcile_entries(
    source: Mapping[Any, Any],
    target: Mapping[Any, Any],
    path: str,
    config: DeepEqualConfig,
    ancestors: Ancestors,
    *,
    skip_nulls: bool,
) -> list[Discrepancy]:
    """Shared body of reconcile_keys, also used for index-keyed arrays."""
    if skip_nulls:
        source = {k: v for k, v in source.items() if v is not None}
        target = {k: v for k, v in target.items() if v is not None}

    discrepancies: list[Discrepancy] = []
    for key in dict.fromkeys([*source, *target]):
        key_path = join_path(path, key)
        if key not in target:
            discrepancies.append(
                Discrepancy(
                    path=key_path,
                    kind=DiscrepancyKind.MISSING_IN_TARGET,
                    detail=f"{key_path} missing in target",
                )
            )
        elif key not in source:
            discrepancies.append(
                Discrepancy(
                    path=key_path,
                    kind=DiscrepancyKind.MISSING_IN_SOURCE,
                    detail=f"{key_path} missing in source",
                )
            )
        else:
            discrepancies.extend(
                dispatch_values(source[key], target[key], key_path, config, ancestors)
            )
    return discrepancies
