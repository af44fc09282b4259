"""Abstract container interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Container(ABC):
    """A holder object that stores a collection of other objects."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of elements in the container."""

    def is_empty(self) -> bool:
        """Return whether the container has no elements."""
        return len(self) == 0

    @abstractmethod
    def clear(self) -> None:
        """Erase all elements from the container."""


class Map(Container):
    """An associative container of key-value pairs with unique keys."""

    @abstractmethod
    def has(self, key: Any) -> bool:
        """Return whether an element with the given key exists."""

    @abstractmethod
    def find(self, key: Any, default: Any = None) -> Any:
        """Return the value for the key, or ``default`` if it is absent."""

    @abstractmethod
    def insert(self, key: Any, value: Any) -> None:
        """Insert a key-value pair or replace the existing value."""

    @abstractmethod
    def remove(self, key: Any) -> bool:
        """Remove the element with the key; return whether it existed."""

    def __contains__(self, key: Any) -> bool:
        return self.has(key)


class Set(Container):
    """A container that stores unique elements."""

    @abstractmethod
    def has(self, key: Any) -> bool:
        """Return whether the element is in the container."""

    @abstractmethod
    def insert(self, key: Any) -> bool:
        """Insert an element; return whether it was newly added."""

    @abstractmethod
    def remove(self, key: Any) -> bool:
        """Remove an element; return whether it was present."""

    def insert_n(self, *keys: Any) -> int:
        """Insert several elements; return how many were newly added."""
        return sum(1 for key in keys if self.insert(key))

    def remove_n(self, *keys: Any) -> int:
        """Remove several elements; return how many were removed."""
        return sum(1 for key in keys if self.remove(key))

    def __contains__(self, key: Any) -> bool:
        return self.has(key)


class SortedMap(Map):
    """A map that keeps a total ordering on its keys."""

    @abstractmethod
    def lower_bound(self, key: Any) -> Any:
        """Iterate from the first element whose key is not less than ``key``."""

    @abstractmethod
    def upper_bound(self, key: Any) -> Any:
        """Iterate from the first element whose key is greater than ``key``."""

    @abstractmethod
    def find_range(self, first: Any, last: Any) -> Any:
        """Iterate over the elements with keys in ``[first, last]``."""


class SortedSet(Set):
    """A set that keeps a total ordering on its elements."""

    @abstractmethod
    def lower_bound(self, key: Any) -> Any:
        """Iterate from the first element not less than ``key``."""

    @abstractmethod
    def upper_bound(self, key: Any) -> Any:
        """Iterate from the first element greater than ``key``."""

    @abstractmethod
    def find_range(self, first: Any, last: Any) -> Any:
        """Iterate over the elements in ``[first, last]``."""


class Queue(Container):
    """A container that adds at one end and removes from the other."""

    @abstractmethod
    def front(self) -> Any:
        """Return the first element."""

    @abstractmethod
    def back(self) -> Any:
        """Return the last element."""

    @abstractmethod
    def push(self, value: Any) -> None:
        """Push an element at the back."""

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the front element."""

    @abstractmethod
    def try_pop(self, default: Any = None) -> Any:
        """Remove and return the front element, or ``default`` if empty."""


class Deque(Container):
    """A container that adds and removes elements at both ends."""

    @abstractmethod
    def front(self) -> Any:
        """Return the first element."""

    @abstractmethod
    def back(self) -> Any:
        """Return the last element."""

    @abstractmethod
    def push_front(self, value: Any) -> None:
        """Push an element at the front."""

    @abstractmethod
    def push_back(self, value: Any) -> None:
        """Push an element at the back."""

    @abstractmethod
    def pop_front(self) -> Any:
        """Remove and return the front element."""

    @abstractmethod
    def pop_back(self) -> Any:
        """Remove and return the back element."""

    @abstractmethod
    def try_pop_front(self, default: Any = None) -> Any:
        """Remove and return the front element, or ``default`` if empty."""

    @abstractmethod
    def try_pop_back(self, default: Any = None) -> Any:
        """Remove and return the back element, or ``default`` if empty."""