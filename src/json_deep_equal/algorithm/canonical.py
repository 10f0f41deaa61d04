"""Canonical JSON text and array canonicalization.

Arrays are compared order-insensitively by sorting each one independently
on the canonical JSON text of its elements, then comparing the sorted
copies position by position.  The policy is deliberately textual: it is
not multiset matching, and two elements with identical canonical text are
indistinguishable to the comparator.

Canonical text rules:
- Object keys sorted; non-string keys rendered with ``str()``.
- Compact separators ``(",", ":")``, UTF-8 text (``ensure_ascii=False``).
- Finite floats with an integral value are rendered as integers, so ``1``
  and ``1.0`` (and ``0.0``/``-0.0``) produce the same text.
- numpy arrays become lists, numpy scalars become native values.

Each array level serializes its whole subtree, so nested arrays are
serialized once per enclosing array level.
"""

from __future__ import annotations

import json
import math
from typing import Any

from json_deep_equal.algorithm.paths import ROOT, join_path
from json_deep_equal.algorithm.predicates import (
    is_array,
    is_plain_object,
    unwrap_scalar,
)
from json_deep_equal.errors import CyclicInputError

__all__ = ["canonical_text", "canonicalize_array"]


def canonical_text(value: Any, path: str = ROOT) -> str:
    """Return the deterministic JSON serialization of ``value``.

    Args:
        value: Any JSON value.
        path:  Location of ``value`` in the compared document.  Only used to
               report where a cycle was found.

    Returns:
        Canonical JSON text.

    Raises:
        CyclicInputError: If ``value`` contains itself.
        TypeError: If ``value`` contains something that is not a JSON value.
    """
    return json.dumps(
        _canonical_form(value, frozenset(), path),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def canonicalize_array(values: Any, path: str = ROOT) -> list[Any]:
    """Return a NEW list holding ``values`` sorted by canonical text.

    The sort is stable and each element's text is computed once.  The input
    is never mutated.

    Args:
        values: A JSON array (list, tuple or numpy array).
        path:   Path of the array, used for cycle error reporting.

    Returns:
        The elements of ``values`` in canonical order.
    """
    items = list(values)
    texts = [canonical_text(item, join_path(path, i)) for i, item in enumerate(items)]
    order = sorted(range(len(items)), key=texts.__getitem__)
    return [items[i] for i in order]


def _canonical_form(value: Any, ancestors: frozenset[int], path: str) -> Any:
    """Rebuild ``value`` as plain JSON-serializable Python objects.

    ``ancestors`` holds the ids of the containers enclosing ``value``;
    meeting one of them again means the structure is cyclic.
    """
    value = unwrap_scalar(value)

    if is_plain_object(value) or is_array(value):
        if id(value) in ancestors:
            raise CyclicInputError(path)
        inner = ancestors | {id(value)}
        if is_plain_object(value):
            return {
                str(k): _canonical_form(v, inner, join_path(path, k))
                for k, v in value.items()
            }
        return [
            _canonical_form(item, inner, join_path(path, i))
            for i, item in enumerate(value)
        ]

    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)

    return value
