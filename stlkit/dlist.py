"""A doubly linked list."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

from stlkit.container import Deque


class _Node:
    __slots__ = ("prev", "next", "value")

    def __init__(self, value: Any = None) -> None:
        self.prev: _Node = self
        self.next: _Node = self
        self.value = value


class DList(Deque):
    """A doubly linked list with constant-time operations at both ends."""

    def __init__(
        self, values: Optional[Iterable[Any]] = None, item_type: Optional[type] = None
    ) -> None:
        self._head = _Node()
        self._length = 0
        self._item_type = item_type
        for v in values or ():
            self.push_back(v)

    def _type_name(self) -> str:
        if self._item_type is not None:
            return self._item_type.__name__
        if self._length:
            return type(self._head.next.value).__name__
        return "object"

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._head:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return f"DList[{self._type_name()}]"

    def is_empty(self) -> bool:
        """Return whether the list has no elements."""
        return self._length == 0

    def clear(self) -> None:
        """Remove all elements."""
        self._head.prev = self._head
        self._head.next = self._head
        self._length = 0

    def front(self) -> Any:
        """Return the first element; raise IndexError if empty."""
        if not self._length:
            raise IndexError("front of an empty list")
        return self._head.next.value

    def back(self) -> Any:
        """Return the last element; raise IndexError if empty."""
        if not self._length:
            raise IndexError("back of an empty list")
        return self._head.prev.value

    def _link_after(self, prev: _Node, val: Any) -> None:
        node = _Node(val)
        node.prev = prev
        node.next = prev.next
        prev.next.prev = node
        prev.next = node
        self._length += 1

    def _unlink(self, node: _Node) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._length -= 1
        return node.value

    def push_front(self, val: Any) -> None:
        """Add ``val`` at the front."""
        self._link_after(self._head, val)

    def push_back(self, val: Any) -> None:
        """Add ``val`` at the back."""
        self._link_after(self._head.prev, val)

    def pop_front(self) -> Any:
        """Remove and return the first element; raise IndexError if empty."""
        if not self._length:
            raise IndexError("DList.pop_front: empty list")
        return self._unlink(self._head.next)

    def pop_back(self) -> Any:
        """Remove and return the last element; raise IndexError if empty."""
        if not self._length:
            raise IndexError("DList.pop_back: empty list")
        return self._unlink(self._head.prev)

    def try_pop_front(self, default: Any = None) -> Any:
        """Remove and return the first element, or ``default`` if empty."""
        return self._unlink(self._head.next) if self._length else default

    def try_pop_back(self, default: Any = None) -> Any:
        """Remove and return the last element, or ``default`` if empty."""
        return self._unlink(self._head.prev) if self._length else default

    def apply(self, fn: Callable[[Any], Any]) -> None:
        """Replace each element, front to back, with ``fn(element)``."""
        node = self._head.next
        while node is not self._head:
            node.value = fn(node.value)
            node = node.next


def dlist_of(*args: Any) -> DList:
    """Return a DList holding the arguments in order."""
    return DList(args)