"""Levenshtein edit distance with cheap early exits, backed by RapidFuzz."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


# Pairs whose length gap exceeds this share of the longer string skip the DP.
LENGTH_DIFF_THRESHOLD = 0.5


def compute_levenshtein(first: str, second: str) -> int:
    """Exact edit distance (insert, delete and substitute all cost 1)."""

    return Levenshtein.distance(first, second)


def levenshtein_distance(first: str, second: str) -> int:
    """Return the edit distance between two strings.

    Strings whose lengths differ by more than half of the longer length are
    not compared character by character: the longer length is returned as an
    upper bound instead. Similarity scores for such pairs are therefore
    approximate (and lower than the exact distance would give).
    """

    if first == second:
        return 0
    if not first:
        return len(second)
    if not second:
        return len(first)

    max_length = max(len(first), len(second))
    if abs(len(first) - len(second)) > max_length * LENGTH_DIFF_THRESHOLD:
        return max_length

    return compute_levenshtein(first, second)
