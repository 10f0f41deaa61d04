"""Type predicates and strict equality for JSON-like values.

``is_plain_object`` is the single object-type discriminator used by both
the top-level validator and the value dispatcher.  ``strict_equal``
compares two values the way JavaScript's ``===`` compares parsed JSON:

- int and float form one Number family: ``1`` equals ``1.0``.
- bool is never a Number: ``True`` does not equal ``1``.
- NaN never equals NaN; ``0.0`` equals ``-0.0``.
- Containers of mismatched shape are equal only when they are the same
  object (reference identity).

numpy scalars and 0-d arrays are unwrapped to their Python equivalents;
numpy arrays with one or more dimensions are arrays.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np

# Type alias for valid JSON values
JsonValue = Mapping[str, Any] | list[Any] | str | int | float | bool | None

__all__ = [
    "JsonValue",
    "is_array",
    "is_plain_object",
    "strict_equal",
    "unwrap_scalar",
]


def is_plain_object(value: Any) -> bool:
    """Return True if ``value`` is a JSON object eligible for key recursion.

    None, arrays and primitives are not plain objects.
    """
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    """Return True if ``value`` is a JSON array.

    Lists, tuples and numpy arrays with at least one dimension qualify.
    """
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    return isinstance(value, (list, tuple))


def unwrap_scalar(value: Any) -> Any:
    """Convert numpy scalars and 0-d arrays to native Python values."""
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value.item()
    return value


def _is_container(value: Any) -> bool:
    return is_plain_object(value) or is_array(value)


def _is_number(value: Any) -> bool:
    # CRITICAL: bool subclasses int in Python
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def strict_equal(left: Any, right: Any) -> bool:
    """Compare two values with identical-type-and-value semantics.

    Args:
        left:  First value.
        right: Second value.

    Returns:
        True if both values belong to the same JSON type family and are equal.
    """
    left = unwrap_scalar(left)
    right = unwrap_scalar(right)

    if _is_container(left) or _is_container(right):
        return left is right

    if _is_number(left) and _is_number(right):
        return bool(left == right)

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if left is None or right is None:
        return left is right

    if isinstance(left, str) and isinstance(right, str):
        return left == right

    return type(left) is type(right) and bool(left == right)
