"""A thread-safe pool of reusable objects."""

from __future__ import annotations

import threading
from typing import Any, Callable, List, Optional


class Pool:
    """A set of spare objects that can be taken out and put back.

    ``get`` hands out a pooled object if there is one, otherwise a fresh one
    from ``factory``, or None when there is no factory.
    """

    def __init__(self, factory: Optional[Callable[[], Any]] = None) -> None:
        self._factory = factory
        self._items: List[Any] = []
        self._lock = threading.Lock()

    def get(self) -> Any:
        """Take an object out of the pool, creating one if it is empty."""
        with self._lock:
            if self._items:
                return self._items.pop()
        return self._factory() if self._factory is not None else None

    def put(self, x: Any) -> None:
        """Return ``x`` to the pool; None is ignored."""
        if x is None:
            return
        with self._lock:
            self._items.append(x)


def make_pool(kind: Callable[[], Any]) -> Pool:
    """Return a pool that creates new objects by calling ``kind()``."""
    return Pool(kind)


def make_pool_with_new(new: Optional[Callable[[], Any]]) -> Pool:
    """Return a pool using ``new`` to create objects; None means no factory."""
    return Pool(new)