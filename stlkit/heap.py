"""Binary min-heap algorithms on mutable lists."""

from __future__ import annotations

import operator
from typing import Any, Callable, List, MutableSequence, Sequence

Less = Callable[[Any, Any], bool]


def _sift_up(heap: MutableSequence[Any], j: int, less: Less) -> None:
    while j > 0:
        i = (j - 1) // 2
        if not less(heap[j], heap[i]):
            break
        heap[i], heap[j] = heap[j], heap[i]
        j = i


def _sift_down(heap: MutableSequence[Any], i0: int, n: int, less: Less) -> bool:
    i = i0
    while True:
        j = 2 * i + 1
        if j >= n:
            break
        right = j + 1
        if right < n and less(heap[right], heap[j]):
            j = right
        if not less(heap[j], heap[i]):
            break
        heap[i], heap[j] = heap[j], heap[i]
        i = j
    return i > i0


def _make(array: MutableSequence[Any], less: Less) -> None:
    n = len(array)
    for i in reversed(range(n // 2)):
        _sift_down(array, i, n, less)


def _push(heap: List[Any], v: Any, less: Less) -> None:
    heap.append(v)
    _sift_up(heap, len(heap) - 1, less)


def _pop(heap: List[Any], less: Less) -> Any:
    if not heap:
        raise IndexError("pop from an empty heap")
    n = len(heap) - 1
    heap[0], heap[n] = heap[n], heap[0]
    _sift_down(heap, 0, n, less)
    return heap.pop()


def _remove(heap: List[Any], i: int, less: Less) -> Any:
    if not 0 <= i < len(heap):
        raise IndexError("heap index out of range")
    n = len(heap) - 1
    if n != i:
        heap[i], heap[n] = heap[n], heap[i]
        if not _sift_down(heap, i, n, less):
            _sift_up(heap, i, less)
    return heap.pop()


def make_min_heap(array: MutableSequence[Any]) -> None:
    """Rearrange ``array`` in place into a min-heap."""
    _make(array, operator.lt)


def is_min_heap(array: Sequence[Any]) -> bool:
    """Return whether ``array`` satisfies the min-heap property."""
    return all(not array[(c - 1) // 2] > array[c] for c in range(1, len(array)))


def push_min_heap(heap: List[Any], v: Any) -> None:
    """Push ``v`` onto the min-heap ``heap``."""
    _push(heap, v, operator.lt)


def pop_min_heap(heap: List[Any]) -> Any:
    """Remove and return the smallest element of ``heap``.

    Raises IndexError if the heap is empty.
    """
    return _pop(heap, operator.lt)


def remove_min_heap(heap: List[Any], i: int) -> Any:
    """Remove and return the element at index ``i`` of the min-heap.

    Raises IndexError if ``i`` is out of range.
    """
    return _remove(heap, i, operator.lt)


def make_heap_func(array: MutableSequence[Any], less: Less) -> None:
    """Rearrange ``array`` in place into a heap ordered by ``less``."""
    _make(array, less)


def is_heap_func(array: Sequence[Any], less: Less) -> bool:
    """Return whether ``less(parent, child)`` holds for every parent and child."""
    return all(less(array[(c - 1) // 2], array[c]) for c in range(1, len(array)))


def push_heap_func(heap: List[Any], v: Any, less: Less) -> None:
    """Push ``v`` onto a heap ordered by ``less``."""
    _push(heap, v, less)


def pop_heap_func(heap: List[Any], less: Less) -> Any:
    """Remove and return the least element by ``less``.

    Raises IndexError if the heap is empty.
    """
    return _pop(heap, less)


def remove_heap_func(heap: List[Any], i: int, less: Less) -> Any:
    """Remove and return the element at index ``i`` of a heap ordered by ``less``.

    Raises IndexError if ``i`` is out of range.
    """
    return _remove(heap, i, less)