"""Guess/answer normalization shared by every comparison."""

from __future__ import annotations

import re

from rebuzzle.matching.cache import LRUCache


NORMALIZE_CACHE_SIZE = 200

_PUNCTUATION_RE = re.compile(r"[^\w\s]|_")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_string(text: str) -> str:
    """Lowercase, drop punctuation, collapse whitespace and trim."""

    stripped = _PUNCTUATION_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub(" ", stripped).strip()


class Normalizer:
    """Memoizing front for :func:`normalize_string`."""

    def __init__(self, cache_size: int = NORMALIZE_CACHE_SIZE) -> None:
        self._cache: LRUCache[str, str] = LRUCache(cache_size)

    @property
    def cache(self) -> LRUCache[str, str]:
        return self._cache

    def __call__(self, text: str) -> str:
        cached = self._cache.get(text)
        if cached is not None:
            return cached

        normalized = normalize_string(text)
        self._cache.set(text, normalized)
        return normalized

    def clear(self) -> None:
        self._cache.clear()
