"""A singly linked list."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional

from stlkit.container import Container


class _Node:
    __slots__ = ("next", "value")

    def __init__(self, value: Any, next_node: Optional["_Node"] = None) -> None:
        self.value = value
        self.next = next_node


class SList(Container):
    """A singly linked list with constant-time access to both ends."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0
        for v in values or ():
            self.push_back(v)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"SList({self.values()!r})"

    def is_empty(self) -> bool:
        """Return whether the list has no elements."""
        return self._length == 0

    def clear(self) -> None:
        """Remove all elements."""
        self._head = None
        self._tail = None
        self._length = 0

    def front(self) -> Any:
        """Return the first element; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("front of an empty list")
        return self._head.value

    def back(self) -> Any:
        """Return the last element; raise IndexError if empty."""
        if self._tail is None:
            raise IndexError("back of an empty list")
        return self._tail.value

    def push_front(self, v: Any) -> None:
        """Add ``v`` at the front."""
        node = _Node(v, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._length += 1

    def push_back(self, v: Any) -> None:
        """Add ``v`` at the back."""
        node = _Node(v)
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node
        self._length += 1

    def pop_front(self) -> Any:
        """Remove and return the first element; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        prev: Optional[_Node] = None
        node = self._head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head = prev

    def values(self) -> List[Any]:
        """Return a list of all elements, front to back."""
        return list(self)

    def apply(self, fn: Callable[[Any], Any]) -> None:
        """Replace each element, front to back, with ``fn(element)``."""
        node = self._head
        while node is not None:
            node.value = fn(node.value)
            node = node.next


def slist_of(*args: Any) -> SList:
    """Return an SList holding the arguments in order."""
    return SList(args)