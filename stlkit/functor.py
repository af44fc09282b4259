"""Basic comparison functors and the callable types built on them."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

LessFn = Callable[[T, T], bool]
"""A function that returns whether its first argument is less than its second."""

CompareFn = Callable[[T, T], int]
"""A three-way compare function returning -1, 0 or 1."""

HashFn = Callable[[T], int]
"""A function that returns the hash of its argument."""


def less(a: Any, b: Any) -> bool:
    """Return ``a < b``."""
    return a < b


def greater(a: Any, b: Any) -> bool:
    """Return ``a > b``."""
    return a > b


def ordered_compare(a: Any, b: Any) -> int:
    """Three-way compare: -1 if a < b, 1 if a > b, otherwise 0."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0