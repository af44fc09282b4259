"""Binary searches over sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Any, Callable, Optional, Sequence

Less = Optional[Callable[[Any, Any], bool]]


def lower_bound(a: Sequence[Any], value: Any, less: Less = None) -> int:
    """Return the index of the first element not less than ``value``.

    Returns ``len(a)`` if there is none. ``a`` must be sorted by ``<`` or by
    ``less`` when it is given.
    """
    if less is None:
        return bisect_left(a, value)
    lo, hi = 0, len(a)
    while lo < hi:
        mid = (lo + hi) // 2
        if less(a[mid], value):
            lo = mid + 1
        else:
            hi = mid
    return lo


def upper_bound(a: Sequence[Any], value: Any, less: Less = None) -> int:
    """Return the index of the first element strictly greater than ``value``.

    Returns ``len(a)`` if there is none.
    """
    if less is None:
        return bisect_right(a, value)
    lo, hi = 0, len(a)
    while lo < hi:
        mid = (lo + hi) // 2
        if less(value, a[mid]):
            hi = mid
        else:
            lo = mid + 1
    return lo


def binary_search(a: Sequence[Any], value: Any, less: Less = None) -> Optional[int]:
    """Return the index of the first element equivalent to ``value``, or None."""
    loc = lower_bound(a, value, less)
    if loc >= len(a):
        return None
    if less is None:
        found = a[loc] == value
    else:
        found = not less(value, a[loc])
    return loc if found else None