"""Copying, filling and in-place transformations of sequences."""

from __future__ import annotations

import random
from typing import Any, Callable, List, MutableSequence, Sequence


def copy(a: Sequence[Any]) -> List[Any]:
    """Return a shallow copy of ``a`` as a list."""
    return list(a)


def copy_to(a: Sequence[Any], to: MutableSequence[Any]) -> MutableSequence[Any]:
    """Replace the contents of ``to`` with the elements of ``a`` and return it."""
    to[:] = list(a)
    return to


def fill(a: MutableSequence[Any], v: Any) -> None:
    """Set every element of ``a`` to ``v``."""
    a[:] = [v] * len(a)


def _zero_of(v: Any) -> Any:
    try:
        return type(v)()
    except TypeError:
        return None


def fill_zero(a: MutableSequence[Any]) -> None:
    """Set every element of ``a`` to the zero value of its type.

    Elements whose type cannot be built without arguments become None.
    """
    a[:] = [_zero_of(v) for v in a]


def fill_pattern(a: MutableSequence[Any], pattern: Sequence[Any]) -> None:
    """Fill ``a`` by repeating ``pattern`` from the start.

    Raises ValueError if ``pattern`` is empty.
    """
    if not pattern:
        raise ValueError("pattern can't be empty")
    width = len(pattern)
    a[:] = [pattern[i % width] for i in range(len(a))]


def transform_to(
    a: Sequence[Any], op: Callable[[Any], Any], b: MutableSequence[Any]
) -> MutableSequence[Any]:
    """Replace the contents of ``b`` with ``op`` applied to each element of ``a``.

    Returns ``b``.
    """
    b[:] = [op(v) for v in a]
    return b


def transform(a: MutableSequence[Any], op: Callable[[Any], Any]) -> None:
    """Apply ``op`` to each element of ``a`` in place."""
    a[:] = [op(v) for v in a]


def transform_copy(a: Sequence[Any], op: Callable[[Any], Any]) -> List[Any]:
    """Return a list of ``op`` applied to each element of ``a``."""
    return [op(v) for v in a]


def replace(a: MutableSequence[Any], old: Any, new: Any) -> None:
    """Replace every element equal to ``old`` with ``new``."""
    a[:] = [new if v == old else v for v in a]


def replace_if(a: MutableSequence[Any], pred: Callable[[Any], bool], new: Any) -> None:
    """Replace every element satisfying ``pred`` with ``new``."""
    a[:] = [new if pred(v) else v for v in a]


def _unique_list(a: Sequence[Any]) -> List[Any]:
    result: List[Any] = []
    for v in a:
        if not result or result[-1] != v:
            result.append(v)
    return result


def unique(a: MutableSequence[Any]) -> MutableSequence[Any]:
    """Drop adjacent repeated elements from ``a`` in place and return it."""
    a[:] = _unique_list(a)
    return a


def unique_copy(a: Sequence[Any]) -> List[Any]:
    """Return a list of ``a`` without adjacent repeats; ``a`` is unchanged."""
    return _unique_list(a)


def remove(a: MutableSequence[Any], x: Any) -> MutableSequence[Any]:
    """Drop every element equal to ``x`` from ``a`` in place and return it."""
    a[:] = [v for v in a if v != x]
    return a


def remove_copy(a: Sequence[Any], x: Any) -> List[Any]:
    """Return a list of the elements of ``a`` not equal to ``x``."""
    return [v for v in a if v != x]


def remove_if(a: MutableSequence[Any], cond: Callable[[Any], bool]) -> MutableSequence[Any]:
    """Drop every element satisfying ``cond`` from ``a`` in place and return it."""
    a[:] = [v for v in a if not cond(v)]
    return a


def remove_if_copy(a: Sequence[Any], cond: Callable[[Any], bool]) -> List[Any]:
    """Return a list of the elements of ``a`` not satisfying ``cond``."""
    return [v for v in a if not cond(v)]


def shuffle(a: MutableSequence[Any]) -> None:
    """Pseudo-randomly reorder the elements of ``a`` in place."""
    random.shuffle(a)


def reverse(a: MutableSequence[Any]) -> None:
    """Reverse the order of the elements of ``a`` in place."""
    a.reverse()


def reverse_copy(a: Sequence[Any]) -> List[Any]:
    """Return a reversed copy of ``a`` as a list."""
    return list(reversed(a))