"""Bounded least-recently-used map. Not thread-safe; callers hold their own lock."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, Optional, TypeVar

from ..errors import InvalidInputError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidInputError(f"LRU capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._items: OrderedDict[K, V] = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def exists(self, key: K) -> bool:
        """Membership test; does not touch recency."""
        return key in self._items

    __contains__ = exists

    def get(self, key: K) -> Optional[V]:
        """Value for key (promoting it to most recent), or None."""
        try:
            self._items.move_to_end(key)
        except KeyError:
            return None
        return self._items[key]

    def put(self, key: K, value: V) -> None:
        """Insert or overwrite key as most recent, evicting the oldest entry if full."""
        if key in self._items:
            self._items.move_to_end(key)
        self._items[key] = value
        if len(self._items) > self._capacity:
            self._items.popitem(last=False)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


__all__: tuple[str, ...] = ("LRUCache",)
