"""Small thread-safe LRU cache for memoized ephemeris snapshots."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Hashable
from threading import Lock
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """A minimal deterministic LRU cache."""

    def __init__(self, capacity: int = 256) -> None:
        """Initialize cache with positive capacity."""
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._lock = Lock()
        self._items: OrderedDict[K, V] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def get(self, key: K, factory: Callable[[], V]) -> V:
        """Get cached value or create/store via `factory`."""
        with self._lock:
            if key in self._items:
                self._items.move_to_end(key)
                self.hits += 1
                return self._items[key]

            value = factory()
            self._items[key] = value
            self.misses += 1
            while len(self._items) > self.capacity:
                self._items.popitem(last=False)
            return value

    def clear(self) -> None:
        """Drop all entries and reset counters."""
        with self._lock:
            self._items.clear()
            self.hits = 0
            self.misses = 0
