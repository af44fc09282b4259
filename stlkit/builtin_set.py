"""An unordered set of unique hashable elements."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional

from stlkit.container import Set


class BuiltinSet(Set):
    """An unordered set of unique elements backed by a hash set."""

    def __init__(self, keys: Optional[Iterable[Any]] = None) -> None:
        self._items: set = set(keys) if keys is not None else set()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, k: Any) -> bool:
        return k in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        types = {type(k) for k in self._items}
        name = types.pop().__name__ if len(types) == 1 else "object"
        body = " ".join(str(k) for k in self._items)
        return f"BuiltinSet[{name}][{body}]"

    def is_empty(self) -> bool:
        """Return whether the set has no elements."""
        return not self._items

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    def has(self, k: Any) -> bool:
        """Return whether ``k`` is in the set."""
        return k in self._items

    def insert(self, k: Any) -> bool:
        """Add ``k``; return whether it was newly added."""
        if k in self._items:
            return False
        self._items.add(k)
        return True

    def insert_n(self, *args: Any) -> int:
        """Add several elements; return how many were newly added."""
        old = len(self._items)
        self._items.update(args)
        return len(self._items) - old

    def remove(self, k: Any) -> bool:
        """Remove ``k``; return whether it was present."""
        if k in self._items:
            self._items.remove(k)
            return True
        return False

    def delete(self, k: Any) -> None:
        """Remove ``k`` if present."""
        self._items.discard(k)

    def remove_n(self, *args: Any) -> int:
        """Remove several elements; return how many were removed."""
        old = len(self._items)
        self._items.difference_update(args)
        return old - len(self._items)

    def keys(self) -> List[Any]:
        """Return a list of all elements."""
        return list(self._items)

    def update(self, other: Iterable[Any]) -> None:
        """Add every element of ``other``."""
        self._items.update(other)

    def union(self, other: Iterable[Any]) -> "BuiltinSet":
        """Return a new set with the elements of both sets."""
        return BuiltinSet(self._items.union(other))

    def intersection(self, other: Iterable[Any]) -> "BuiltinSet":
        """Return a new set with the elements common to both sets."""
        return BuiltinSet(self._items.intersection(other))

    def difference(self, other: Iterable[Any]) -> "BuiltinSet":
        """Return a new set with the elements not in ``other``."""
        return BuiltinSet(self._items.difference(other))

    def is_disjoint_of(self, other: Iterable[Any]) -> bool:
        """Return whether the sets have no element in common."""
        return self._items.isdisjoint(other)

    def is_subset_of(self, other: Iterable[Any]) -> bool:
        """Return whether every element is also in ``other``."""
        return self._items.issubset(other)

    def is_superset_of(self, other: Iterable[Any]) -> bool:
        """Return whether every element of ``other`` is in this set."""
        return self._items.issuperset(other)


def set_of(*args: Any) -> BuiltinSet:
    """Return a BuiltinSet holding the arguments."""
    return BuiltinSet(args)