"""A growable array with tracked capacity."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional, Union

from stlkit.container import Container


class Vector(Container):
    """A sequence container that can change in size.

    Capacity is tracked as in a growable array: it grows by doubling when
    exceeded and is kept when elements are removed.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Optional[Iterable[Any]] = None, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: List[Any] = list(values) if values is not None else []
        self._capacity = max(capacity, len(self._items))

    def _grow_to(self, n: int) -> None:
        if n > self._capacity:
            self._capacity = max(n, 2 * self._capacity)

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._items):
            raise IndexError(f"vector index {i} out of range")

    def _check_range(self, i: int, j: int) -> None:
        if not 0 <= i <= j <= len(self._items):
            raise IndexError(f"invalid range [{i}, {j}) for vector of length {len(self._items)}")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, i: Union[int, slice]) -> Any:
        if isinstance(i, slice):
            return self._items[i]
        self._check_index(i)
        return self._items[i]

    def __setitem__(self, i: int, x: Any) -> None:
        self._check_index(i)
        self._items[i] = x

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def is_empty(self) -> bool:
        """Return whether the vector has no elements."""
        return not self._items

    def cap(self) -> int:
        """Return the capacity of the vector."""
        return self._capacity

    def clear(self) -> None:
        """Remove all elements, keeping the capacity."""
        self._items.clear()

    def reserve(self, n: int) -> None:
        """Raise the capacity to at least ``n``; never lowers it."""
        if self._capacity < n:
            self._capacity = n

    def shrink(self) -> None:
        """Drop unused capacity."""
        self._capacity = len(self._items)

    def push_back(self, x: Any) -> None:
        """Append ``x`` at the end."""
        self._items.append(x)
        self._grow_to(len(self._items))

    def pop_back(self) -> Any:
        """Remove and return the last element; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty vector")
        return self._items.pop()

    def try_pop_back(self, default: Any = None) -> Any:
        """Remove and return the last element, or ``default`` if empty."""
        return self._items.pop() if self._items else default

    def back(self) -> Any:
        """Return the last element; raise IndexError if empty."""
        if not self._items:
            raise IndexError("back of an empty vector")
        return self._items[-1]

    def append(self, *args: Any) -> None:
        """Append all arguments at the end."""
        self._items.extend(args)
        self._grow_to(len(self._items))

    def insert(self, i: int, *args: Any) -> None:
        """Insert the arguments so that the first of them lands at index ``i``.

        Raises IndexError if ``i`` is not in ``[0, len]``.
        """
        if not 0 <= i <= len(self._items):
            raise IndexError(f"insert index {i} out of range")
        self._items[i:i] = args
        total = len(self._items)
        if total > self._capacity:
            self._capacity = total

    def remove(self, i: int) -> None:
        """Remove the element at index ``i``."""
        self.remove_range(i, i + 1)

    def remove_range(self, i: int, j: int) -> None:
        """Remove the elements in ``[i, j)``; raise IndexError on a bad range."""
        self._check_range(i, j)
        del self._items[i:j]

    def remove_length(self, i: int, length: int) -> None:
        """Remove ``length`` elements starting at index ``i``."""
        self.remove_range(i, i + length)

    def remove_if(self, cond: Callable[[Any], bool]) -> None:
        """Remove every element for which ``cond`` is true."""
        self._items[:] = [v for v in self._items if not cond(v)]

    def apply(self, fn: Callable[[Any], Any]) -> None:
        """Replace each element, in order, with ``fn(element)``."""
        self._items[:] = [fn(v) for v in self._items]

    def iterate_range(self, i: int, j: int) -> Iterator[Any]:
        """Return an iterator over the elements in ``[i, j)``."""
        self._check_range(i, j)
        return iter(self._items[i:j])


def make_vector_cap(c: int) -> Vector:
    """Return an empty vector with capacity ``c``."""
    return Vector(capacity=c)


def vector_of(*args: Any) -> Vector:
    """Return a vector holding the arguments."""
    return Vector(args)


def as_vector(s: List[Any]) -> Vector:
    """Return a vector that uses the list ``s`` itself as its storage."""
    v = Vector()
    v._items = s
    v._capacity = len(s)
    return v