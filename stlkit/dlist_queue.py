"""A double-ended queue built on a doubly linked list."""

from __future__ import annotations

from typing import Any, Optional

from stlkit.container import Deque
from stlkit.dlist import DList


class DListQueue(Deque):
    """A FIFO container that can also add and remove at both ends."""

    def __init__(self, item_type: Optional[type] = None) -> None:
        self._list = DList(item_type=item_type)

    def __len__(self) -> int:
        return len(self._list)

    def __str__(self) -> str:
        return f"Queue[{self._list._type_name()}]"

    def is_empty(self) -> bool:
        """Return whether the queue has no elements."""
        return self._list.is_empty()

    def clear(self) -> None:
        """Remove all elements."""
        self._list.clear()

    def front(self) -> Any:
        """Return the first element; raise IndexError if empty."""
        return self._list.front()

    def back(self) -> Any:
        """Return the last element; raise IndexError if empty."""
        return self._list.back()

    def push_front(self, val: Any) -> None:
        """Add ``val`` at the front."""
        self._list.push_front(val)

    def push_back(self, val: Any) -> None:
        """Add ``val`` at the back."""
        self._list.push_back(val)

    def pop_front(self) -> Any:
        """Remove and return the first element; raise IndexError if empty."""
        return self._list.pop_front()

    def pop_back(self) -> Any:
        """Remove and return the last element; raise IndexError if empty."""
        return self._list.pop_back()

    def try_pop_front(self, default: Any = None) -> Any:
        """Remove and return the first element, or ``default`` if empty."""
        return self._list.try_pop_front(default)

    def try_pop_back(self, default: Any = None) -> Any:
        """Remove and return the last element, or ``default`` if empty."""
        return self._list.try_pop_back(default)