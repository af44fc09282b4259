"""Sorting and sortedness checks for sequences."""

from __future__ import annotations

from functools import cmp_to_key
from itertools import pairwise
from typing import Any, Callable, MutableSequence, Sequence


def is_sorted(a: Sequence[Any]) -> bool:
    """Return whether ``a`` is in ascending order."""
    return not any(y < x for x, y in pairwise(a))


def is_desc_sorted(a: Sequence[Any]) -> bool:
    """Return whether ``a`` is in descending order."""
    return not any(y > x for x, y in pairwise(a))


def sort(a: MutableSequence[Any]) -> None:
    """Sort ``a`` in ascending order in place."""
    a[:] = sorted(a)


def stable_sort(a: MutableSequence[Any]) -> None:
    """Sort ``a`` in ascending order in place, keeping equal elements in order."""
    a[:] = sorted(a)


def desc_sort(a: MutableSequence[Any]) -> None:
    """Sort ``a`` in descending order in place."""
    a[:] = sorted(a, reverse=True)


def desc_stable_sort(a: MutableSequence[Any]) -> None:
    """Sort ``a`` in descending order in place, keeping equal elements in order."""
    a[:] = sorted(a, reverse=True)


def _key_from_less(less: Callable[[Any, Any], bool]) -> Any:
    def cmp(x: Any, y: Any) -> int:
        if less(x, y):
            return -1
        if less(y, x):
            return 1
        return 0

    return cmp_to_key(cmp)


def sort_func(a: MutableSequence[Any], less: Callable[[Any, Any], bool]) -> None:
    """Sort ``a`` in place so that ``less`` orders it ascending."""
    a[:] = sorted(a, key=_key_from_less(less))


def stable_sort_func(a: MutableSequence[Any], less: Callable[[Any, Any], bool]) -> None:
    """Sort ``a`` in place by ``less``, keeping equivalent elements in order."""
    a[:] = sorted(a, key=_key_from_less(less))