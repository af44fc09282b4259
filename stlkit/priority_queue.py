"""A priority queue backed by a binary heap."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, List, Optional

from stlkit.container import Container
from stlkit.heap import make_heap_func, pop_heap_func, push_heap_func

Less = Callable[[Any, Any], bool]


class PriorityQueue(Container):
    """A queue whose smallest element, by ``<`` or by ``less``, comes out first."""

    def __init__(
        self, elements: Optional[Iterable[Any]] = None, less: Optional[Less] = None
    ) -> None:
        self._less: Less = less if less is not None else operator.lt
        self._heap: List[Any] = list(elements) if elements is not None else []
        make_heap_func(self._heap, self._less)

    @classmethod
    def on(cls, items: List[Any]) -> "PriorityQueue":
        """Create a queue that uses ``items`` itself as its storage.

        The list is rearranged into a min-heap and shares later changes.
        """
        pq = cls()
        make_heap_func(items, pq._less)
        pq._heap = items
        return pq

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        """Return whether the queue has no elements."""
        return not self._heap

    def clear(self) -> None:
        """Remove all elements."""
        del self._heap[:]

    def top(self) -> Any:
        """Return the top element without removing it.

        Raises IndexError if the queue is empty.
        """
        if not self._heap:
            raise IndexError("top of an empty priority queue")
        return self._heap[0]

    def push(self, v: Any) -> None:
        """Add ``v`` to the queue."""
        push_heap_func(self._heap, v, self._less)

    def pop(self) -> Any:
        """Remove and return the top element.

        Raises IndexError if the queue is empty.
        """
        return pop_heap_func(self._heap, self._less)