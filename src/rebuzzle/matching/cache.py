"""Bounded least-recently-used cache shared by the matching helpers."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable
import logging
import threading
from typing import Generic, TypeVar


logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Fixed-capacity mapping that evicts the least recently used key.

    Reads and writes are serialized with a lock so one instance can be
    shared between threads.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self._max_size = max_size
        self._entries: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return self._max_size

    def get(self, key: K) -> V | None:
        with self._lock:
            if key not in self._entries:
                return None
            self._entries.move_to_end(key)
            return self._entries[key]

    def set(self, key: K, value: V) -> None:
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self._max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("LRU cache full (%d), evicted %r", self._max_size, evicted)
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[K]:
        """Return keys ordered from least to most recently used."""

        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
