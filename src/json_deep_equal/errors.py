"""Exception hierarchy for json-deep-equal.

Only two conditions are failures: a top-level argument that is not a JSON
object, and a self-referencing input.  Every other difference between the
compared values is reported as a ``Discrepancy`` record, never raised.
"""

from __future__ import annotations

__all__ = ["CyclicInputError", "InvalidInputError", "JsonDeepEqualError"]


class JsonDeepEqualError(Exception):
    """Base class for all json-deep-equal errors."""


class InvalidInputError(JsonDeepEqualError, TypeError):
    """A top-level argument is not a plain JSON object.

    Raised before any recursion takes place.  Nested values are never
    validated: nested primitives and arrays are ordinary comparison input.

    Attributes:
        name:  Which argument was rejected ("source" or "target").
        value: The rejected value.
    """

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"{name} must be a JSON object (mapping), got {type(value).__name__}"
        )


class CyclicInputError(JsonDeepEqualError, ValueError):
    """A compared structure references one of its own ancestors.

    Attributes:
        path: Dot-separated path at which the cycle closed ("" for the root).
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cyclic reference detected at '{path or '<root>'}'")
