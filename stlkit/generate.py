"""Sequence generators."""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence, Union

Number = Union[int, float]


def range_of(first: Number, last: Number) -> List[Number]:
    """Return ``[first, first + 1, ...]`` for values below ``last``.

    Raises ValueError if ``last - first`` truncates to a negative count.
    """
    if int(last - first) < 0:
        raise ValueError(f"invalid range [{first}, {last})")
    result = []
    v = first
    while v < last:
        result.append(v)
        v += 1
    return result


def generate(a: MutableSequence[Any], gen: Callable[[], Any]) -> None:
    """Replace each element of ``a`` in order with a fresh ``gen()`` value."""
    a[:] = [gen() for _ in range(len(a))]