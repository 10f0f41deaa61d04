"""Dot-separated path composition.

Root path is "" (empty string); each nested level appends ".{key}", with
no separator before the first segment: ``user.interests.0``.
"""

from __future__ import annotations

from typing import Any

__all__ = ["ROOT", "join_path"]

ROOT = ""


def join_path(parent: str, key: Any) -> str:
    """Return the path of ``key`` inside the node at ``parent``."""
    return f"{parent}.{key}" if parent else str(key)
