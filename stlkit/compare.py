"""Element-wise comparison of sequences."""

from __future__ import annotations

from typing import Any, Sequence


def equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return whether both sequences have the same length and equal elements."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def compare(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Compare two sequences lexicographically, returning -1, 0 or 1."""
    for x, y in zip(a, b):
        if x < y:
            return -1
        if x > y:
            return 1
    if len(a) < len(b):
        return -1
    if len(a) > len(b):
        return 1
    return 0