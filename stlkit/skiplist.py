"""An ordered map implemented as a skip list."""

from __future__ import annotations

import random
from typing import Any, Callable, Iterator, List, Mapping, Optional, Tuple

from stlkit.container import SortedMap
from stlkit.functor import ordered_compare

MAX_LEVEL = 40

CompareFn = Callable[[Any, Any], int]


class _Node:
    __slots__ = ("key", "value", "next")

    def __init__(self, level: int, key: Any = None, value: Any = None) -> None:
        if not 1 <= level <= MAX_LEVEL:
            raise ValueError(f"invalid skip list node level {level}")
        self.key = key
        self.value = value
        self.next: List[Optional[_Node]] = [None] * level


def _walk(node: Optional[_Node], end: Optional[_Node] = None) -> Iterator[Tuple[Any, Any]]:
    while node is not None and node is not end:
        yield node.key, node.value
        node = node.next[0]


class SkipList(SortedMap):
    """A sorted map of unique keys with expected logarithmic operations.

    Keys are ordered by ``<`` or by the three-way compare function ``cmp``.
    ``seed`` makes the random level choice reproducible.
    """

    def __init__(self, cmp: Optional[CompareFn] = None, seed: Optional[int] = None) -> None:
        self._cmp: CompareFn = cmp if cmp is not None else ordered_compare
        self._rand = random.Random(seed)
        self._head = _Node(MAX_LEVEL)
        self._level = 1
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        return (k for k, _ in _walk(self._head.next[0]))

    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def __repr__(self) -> str:
        return f"SkipList({dict(self.items())!r})"

    def level(self) -> int:
        """Return the current number of levels in use."""
        return self._level

    def is_empty(self) -> bool:
        """Return whether the map has no elements."""
        return self._len == 0

    def clear(self) -> None:
        """Remove all elements."""
        self._head.next = [None] * MAX_LEVEL
        self._level = 1
        self._len = 0

    def _random_level(self) -> int:
        k = self._rand.getrandbits(64) & ((1 << MAX_LEVEL) - 1)
        level = MAX_LEVEL - k.bit_length() + 1
        # Most levels should stay below log2(len); cap unexpectedly large ones.
        while level > 3 and (1 << (level - 3)) > self._len:
            level -= 1
        return min(level, MAX_LEVEL)

    def _lower_bound_node(self, key: Any) -> Optional[_Node]:
        prev = self._head
        for i in reversed(range(self._level)):
            cur = prev.next[i]
            while cur is not None:
                r = self._cmp(cur.key, key)
                if r == 0:
                    return cur
                if r > 0:
                    break
                prev = cur
                cur = cur.next[i]
        return prev.next[0]

    def _upper_bound_node(self, key: Any) -> Optional[_Node]:
        node = self._lower_bound_node(key)
        if node is not None and self._cmp(node.key, key) == 0:
            return node.next[0]
        return node

    def _find_node(self, key: Any) -> Optional[_Node]:
        node = self._lower_bound_node(key)
        if node is not None and self._cmp(node.key, key) == 0:
            return node
        return None

    def _find_prev_nodes(self, key: Any) -> List[_Node]:
        prevs: List[_Node] = [self._head] * self._level
        prev = self._head
        for i in reversed(range(self._level)):
            nxt = prev.next[i]
            while nxt is not None and self._cmp(nxt.key, key) < 0:
                prev = nxt
                nxt = nxt.next[i]
            prevs[i] = prev
        return prevs

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, replacing the value of an existing key."""
        prevs: List[_Node] = [self._head] * self._level
        prev = self._head
        for i in reversed(range(self._level)):
            cur = prev.next[i]
            while cur is not None:
                r = self._cmp(cur.key, key)
                if r == 0:
                    cur.value = value
                    return
                if r > 0:
                    break
                prev = cur
                cur = cur.next[i]
            prevs[i] = prev

        level = self._random_level()
        node = _Node(level, key, value)
        for i in range(min(level, self._level)):
            node.next[i] = prevs[i].next[i]
            prevs[i].next[i] = node
        if level > self._level:
            for i in range(self._level, level):
                self._head.next[i] = node
            self._level = level
        self._len += 1

    def find(self, key: Any, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` if it is absent."""
        node = self._find_node(key)
        return node.value if node is not None else default

    def has(self, key: Any) -> bool:
        """Return whether ``key`` is in the map."""
        return self._find_node(key) is not None

    def lower_bound(self, key: Any) -> Iterator[Tuple[Any, Any]]:
        """Iterate ``(key, value)`` pairs from the first key not less than ``key``."""
        return _walk(self._lower_bound_node(key))

    def upper_bound(self, key: Any) -> Iterator[Tuple[Any, Any]]:
        """Iterate ``(key, value)`` pairs from the first key greater than ``key``."""
        return _walk(self._upper_bound_node(key))

    def find_range(self, first: Any, last: Any) -> Iterator[Tuple[Any, Any]]:
        """Iterate ``(key, value)`` pairs with keys in ``[first, last]``."""
        return _walk(self._lower_bound_node(first), self._upper_bound_node(last))

    def remove(self, key: Any) -> bool:
        """Remove ``key``; return whether it was present."""
        prevs = self._find_prev_nodes(key)
        node = prevs[0].next[0]
        if node is None or self._cmp(node.key, key) != 0:
            return False
        for i, nxt in enumerate(node.next):
            prevs[i].next[i] = nxt
        while self._level > 1 and self._head.next[self._level - 1] is None:
            self._level -= 1
        self._len -= 1
        return True

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Iterate all ``(key, value)`` pairs in key order."""
        return _walk(self._head.next[0])

    def keys(self) -> Iterator[Any]:
        """Iterate all keys in order."""
        return iter(self)

    def values(self) -> Iterator[Any]:
        """Iterate all values in key order."""
        return (v for _, v in _walk(self._head.next[0]))

    def apply(self, fn: Callable[[Any, Any], Any]) -> None:
        """Replace each value, in key order, with ``fn(key, value)``."""
        node = self._head.next[0]
        while node is not None:
            node.value = fn(node.key, node.value)
            node = node.next[0]


def skip_list_from_map(m: Mapping[Any, Any]) -> SkipList:
    """Return a SkipList holding the items of the mapping ``m``."""
    sl = SkipList()
    for k, v in m.items():
        sl.insert(k, v)
    return sl