"""A sorted set implemented with a skip list."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional

from stlkit.container import SortedSet
from stlkit.skiplist import SkipList

CompareFn = Callable[[Any, Any], int]


class SkipListSet(SortedSet):
    """A sorted set of unique elements backed by a skip list.

    Elements are ordered by ``<`` or by the three-way compare function
    ``cmp``. ``seed`` makes the random level choice reproducible.
    """

    def __init__(self, cmp: Optional[CompareFn] = None, seed: Optional[int] = None) -> None:
        self._map = SkipList(cmp, seed)

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._map)

    def __contains__(self, key: Any) -> bool:
        return self._map.has(key)

    def __repr__(self) -> str:
        return f"SkipListSet({self.keys()!r})"

    def is_empty(self) -> bool:
        """Return whether the set has no elements."""
        return self._map.is_empty()

    def clear(self) -> None:
        """Remove all elements."""
        self._map.clear()

    def has(self, key: Any) -> bool:
        """Return whether ``key`` is in the set."""
        return self._map.has(key)

    def insert(self, key: Any) -> bool:
        """Add ``key``; return whether it was newly added."""
        old = len(self._map)
        self._map.insert(key, None)
        return len(self._map) > old

    def insert_n(self, *args: Any) -> int:
        """Add several elements; return how many were newly added."""
        old = len(self._map)
        for key in args:
            self._map.insert(key, None)
        return len(self._map) - old

    def remove(self, key: Any) -> bool:
        """Remove ``key``; return whether it was present."""
        return self._map.remove(key)

    def remove_n(self, *args: Any) -> int:
        """Remove several elements; return how many were removed."""
        old = len(self._map)
        for key in args:
            self._map.remove(key)
        return old - len(self._map)

    def keys(self) -> List[Any]:
        """Return a sorted list of all elements."""
        return list(self._map)

    def lower_bound(self, key: Any) -> Iterator[Any]:
        """Iterate elements from the first one not less than ``key``."""
        return (k for k, _ in self._map.lower_bound(key))

    def upper_bound(self, key: Any) -> Iterator[Any]:
        """Iterate elements from the first one greater than ``key``."""
        return (k for k, _ in self._map.upper_bound(key))

    def find_range(self, first: Any, last: Any) -> Iterator[Any]:
        """Iterate elements in ``[first, last]``."""
        return (k for k, _ in self._map.find_range(first, last))


def skip_list_set_of(*args: Any) -> SkipListSet:
    """Return a SkipListSet holding the arguments."""
    s = SkipListSet()
    s.insert_n(*args)
    return s