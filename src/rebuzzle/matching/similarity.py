"""Similarity scoring and fuzzy acceptance of player guesses."""

from __future__ import annotations

import logging

from rebuzzle.matching.cache import LRUCache
from rebuzzle.matching.distance import levenshtein_distance
from rebuzzle.matching.normalize import NORMALIZE_CACHE_SIZE, Normalizer


logger = logging.getLogger(__name__)

PERFECT_SIMILARITY = 100.0
DEFAULT_FUZZY_THRESHOLD = 85.0
SIMILARITY_CACHE_SIZE = 100


def _pair_key(first: str, second: str) -> tuple[str, str]:
    return (first, second) if first <= second else (second, first)


def _split_words(normalized: str) -> list[str]:
    return [word for word in normalized.split(" ") if word]


class StringSimilarityMatcher:
    """Scores how close a guess is to an answer, tolerating typos.

    Each matcher owns a normalization cache and a similarity cache. Both are
    bounded LRU caches, so memory stays flat no matter how many guesses are
    checked.
    """

    def __init__(
        self,
        *,
        normalize_cache_size: int = NORMALIZE_CACHE_SIZE,
        similarity_cache_size: int = SIMILARITY_CACHE_SIZE,
    ) -> None:
        self._normalizer = Normalizer(normalize_cache_size)
        self._similarity_cache: LRUCache[tuple[str, str], float] = LRUCache(similarity_cache_size)

    def normalize(self, text: str) -> str:
        return self._normalizer(text)

    def similarity(self, first: str, second: str) -> float:
        """Return a score in [0, 100]; 100 means equal after normalization."""

        if first == second:
            return PERFECT_SIMILARITY

        normalized_first = self.normalize(first)
        normalized_second = self.normalize(second)
        if normalized_first == normalized_second:
            return PERFECT_SIMILARITY

        key = _pair_key(normalized_first, normalized_second)
        cached = self._similarity_cache.get(key)
        if cached is not None:
            return cached

        max_length = max(len(normalized_first), len(normalized_second))
        if max_length == 0:
            score = PERFECT_SIMILARITY
        else:
            distance = levenshtein_distance(normalized_first, normalized_second)
            score = ((max_length - distance) / max_length) * PERFECT_SIMILARITY

        self._similarity_cache.set(key, score)
        return score

    def fuzzy_match(self, guess: str, target: str, threshold: float = DEFAULT_FUZZY_THRESHOLD) -> bool:
        return self.similarity(guess, target) >= threshold

    def contains_fuzzy_match(
        self,
        guess: str,
        target: str,
        threshold: float = DEFAULT_FUZZY_THRESHOLD,
    ) -> bool:
        """Accept guesses that contain the target outright, else fall back to fuzzy."""

        if self.normalize(target) in self.normalize(guess):
            return True
        return self.fuzzy_match(guess, target, threshold)

    def validate_words(
        self,
        guess: str,
        correct_answer: str,
        threshold: float = DEFAULT_FUZZY_THRESHOLD,
    ) -> list[bool]:
        """Flag each word of the guess as correct or not.

        A guess word is correct when it equals any answer word, or fuzzy-matches
        one. Words are not aligned by position, and the result has one entry
        per guess word.
        """

        guess_words = _split_words(self.normalize(guess))
        answer_words = _split_words(self.normalize(correct_answer))
        answer_set = set(answer_words)

        results: list[bool] = []
        for word in guess_words:
            if word in answer_set:
                results.append(True)
                continue
            results.append(any(self.fuzzy_match(word, answer_word, threshold) for answer_word in answer_words))
        return results

    def clear(self) -> None:
        self._normalizer.clear()
        self._similarity_cache.clear()

    def cache_info(self) -> dict[str, int]:
        return {
            "normalize_size": len(self._normalizer.cache),
            "normalize_max_size": self._normalizer.cache.max_size,
            "similarity_size": len(self._similarity_cache),
            "similarity_max_size": self._similarity_cache.max_size,
        }


_default_matcher = StringSimilarityMatcher()


def default_matcher() -> StringSimilarityMatcher:
    """Process-wide matcher behind the module-level helpers."""

    return _default_matcher


def normalize(text: str) -> str:
    return _default_matcher.normalize(text)


def similarity(first: str, second: str) -> float:
    return _default_matcher.similarity(first, second)


def fuzzy_match(guess: str, target: str, threshold: float = DEFAULT_FUZZY_THRESHOLD) -> bool:
    return _default_matcher.fuzzy_match(guess, target, threshold)


def contains_fuzzy_match(guess: str, target: str, threshold: float = DEFAULT_FUZZY_THRESHOLD) -> bool:
    return _default_matcher.contains_fuzzy_match(guess, target, threshold)


def validate_words(guess: str, correct_answer: str, threshold: float = DEFAULT_FUZZY_THRESHOLD) -> list[bool]:
    return _default_matcher.validate_words(guess, correct_answer, threshold)


def clear_caches() -> None:
    logger.debug("Clearing default matcher caches: %s", _default_matcher.cache_info())
    _default_matcher.clear()
