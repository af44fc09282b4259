"""Minimum, maximum and linear lookups over sequences."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Sequence, Tuple


def max_value(a: Any, b: Any) -> Any:
    """Return the larger of ``a`` and ``b``; ``b`` when they are equal."""
    return a if a > b else b


def min_value(a: Any, b: Any) -> Any:
    """Return the smaller of ``a`` and ``b``; ``b`` when they are equal."""
    return a if a < b else b


def _require_values(values: Sequence[Any]) -> None:
    if not values:
        raise ValueError("at least one value is required")


def max_n(*args: Any) -> Any:
    """Return the maximum of the arguments; the first one among equals.

    Raises ValueError when called with no arguments.
    """
    _require_values(args)
    best = args[0]
    for v in args[1:]:
        if v > best:
            best = v
    return best


def min_n(*args: Any) -> Any:
    """Return the minimum of the arguments; the first one among equals.

    Raises ValueError when called with no arguments.
    """
    _require_values(args)
    best = args[0]
    for v in args[1:]:
        if v < best:
            best = v
    return best


def min_max(a: Any, b: Any) -> Tuple[Any, Any]:
    """Return ``(min, max)`` of ``a`` and ``b``."""
    return (a, b) if a < b else (b, a)


def min_max_n(*args: Any) -> Tuple[Any, Any]:
    """Return ``(min, max)`` of the arguments.

    Raises ValueError when called with no arguments.
    """
    _require_values(args)
    lo = hi = args[0]
    for v in args[1:]:
        if v < lo:
            lo = v
        if v > hi:
            hi = v
    return lo, hi


def find(a: Iterable[Any], x: Any) -> Optional[int]:
    """Return the index of the first element equal to ``x``, or None."""
    return next((i for i, v in enumerate(a) if v == x), None)


def find_if(a: Iterable[Any], cond: Callable[[Any], bool]) -> Optional[int]:
    """Return the index of the first element satisfying ``cond``, or None."""
    return next((i for i, v in enumerate(a) if cond(v)), None)


def index(a: Iterable[Any], x: Any) -> int:
    """Return the index of the first element equal to ``x``, or -1."""
    found = find(a, x)
    return -1 if found is None else found


def all_of(a: Iterable[Any], pred: Callable[[Any], bool]) -> bool:
    """Return whether ``pred`` holds for every element."""
    return all(pred(v) for v in a)


def any_of(a: Iterable[Any], pred: Callable[[Any], bool]) -> bool:
    """Return whether ``pred`` holds for at least one element."""
    return any(pred(v) for v in a)


def none_of(a: Iterable[Any], pred: Callable[[Any], bool]) -> bool:
    """Return whether ``pred`` holds for no element."""
    return not any_of(a, pred)