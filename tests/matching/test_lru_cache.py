from __future__ import annotations

import threading

import pytest

from rebuzzle.matching.cache import LRUCache


def test_full_cache_evicts_least_recently_used_key() -> None:
    cache: LRUCache[str, int] = LRUCache(2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("c", 3)

    assert "a" not in cache
    assert cache.get("b") == 2
    assert cache.get("c") == 3
    assert len(cache) == 2


def test_get_refreshes_recency() -> None:
    cache: LRUCache[str, int] = LRUCache(2)
    cache.set("a", 1)
    cache.set("b", 2)

    assert cache.get("a") == 1
    cache.set("c", 3)

    assert cache.keys() == ["a", "c"]
    assert cache.get("b") is None


def test_updating_existing_key_does_not_evict() -> None:
    cache: LRUCache[str, int] = LRUCache(2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("a", 10)

    assert len(cache) == 2
    assert cache.keys() == ["b", "a"]
    assert cache.get("a") == 10


def test_membership_check_does_not_touch_recency() -> None:
    cache: LRUCache[str, int] = LRUCache(2)
    cache.set("a", 1)
    cache.set("b", 2)

    assert "a" in cache
    cache.set("c", 3)

    assert "a" not in cache


def test_clear_empties_cache() -> None:
    cache: LRUCache[str, int] = LRUCache(3)
    cache.set("a", 1)
    cache.clear()

    assert len(cache) == 0
    assert cache.get("a") is None


def test_invalid_capacity_is_rejected() -> None:
    with pytest.raises(ValueError, match="max_size"):
        LRUCache(0)


def test_concurrent_writers_respect_capacity() -> None:
    cache: LRUCache[int, int] = LRUCache(50)

    def _writer(offset: int) -> None:
        for value in range(offset, offset + 500):
            cache.set(value, value)
            cache.get(value - 1)

    threads = [threading.Thread(target=_writer, args=(index * 1000,)) for index in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 50
