"""Typo-tolerant matching of player guesses against puzzle answers."""

from .cache import LRUCache
from .distance import compute_levenshtein, levenshtein_distance
from .normalize import Normalizer, normalize_string
from .similarity import (
    DEFAULT_FUZZY_THRESHOLD,
    PERFECT_SIMILARITY,
    StringSimilarityMatcher,
    clear_caches,
    contains_fuzzy_match,
    default_matcher,
    fuzzy_match,
    validate_words,
)

__all__ = [
    "DEFAULT_FUZZY_THRESHOLD",
    "LRUCache",
    "Normalizer",
    "PERFECT_SIMILARITY",
    "StringSimilarityMatcher",
    "clear_caches",
    "compute_levenshtein",
    "contains_fuzzy_match",
    "default_matcher",
    "fuzzy_match",
    "levenshtein_distance",
    "normalize_string",
    "validate_words",
]
