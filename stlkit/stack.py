"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any, List

from stlkit.container import Container


class Stack(Container):
    """A LIFO container with a tracked capacity that grows by doubling."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: List[Any] = []
        self._capacity = capacity

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return whether the stack has no elements."""
        return not self._items

    def cap(self) -> int:
        """Return the capacity of the stack."""
        return self._capacity

    def clear(self) -> None:
        """Remove all elements, keeping the capacity."""
        self._items.clear()

    def push(self, t: Any) -> None:
        """Push ``t`` onto the top."""
        self._items.append(t)
        if len(self._items) > self._capacity:
            self._capacity = max(len(self._items), 2 * self._capacity)

    def try_pop(self, default: Any = None) -> Any:
        """Remove and return the top element, or ``default`` if empty."""
        return self._items.pop() if self._items else default

    def pop(self) -> Any:
        """Remove and return the top element; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top element; raise IndexError if empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]