"""Lenient, non-AI answer validation built on the similarity matcher."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import logging
import re

from rebuzzle.matching.distance import levenshtein_distance
from rebuzzle.matching.similarity import PERFECT_SIMILARITY, StringSimilarityMatcher, default_matcher
from rebuzzle.validation.config import ValidationSettings
from rebuzzle.validation.contractions import IGNORABLE_WORDS, expand_contractions


logger = logging.getLogger(__name__)

METHOD_EXACT = "exact"
METHOD_WORD_ORDER = "word-order"
METHOD_FUZZY = "fuzzy"

# Rejected guesses above this similarity get spelling hints.
SUGGESTION_MIN_SIMILARITY = 50.0

_PUNCTUATION_KEEP_APOSTROPHE_RE = re.compile(r"[^\w\s']|_")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(slots=True)
class AnswerVerdict:
    """Outcome of checking one guess against the canonical answer."""

    is_correct: bool
    confidence: float
    method: str
    reasoning: str | None = None
    suggestions: list[str] = field(default_factory=list)
    word_results: list[bool] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def normalize_for_comparison(text: str, settings: ValidationSettings | None = None) -> str:
    """Apply the configured leniency rules before comparing two answers."""

    active = settings or ValidationSettings()
    result = text
    if active.ignore_capitalization:
        result = result.lower()
    if active.ignore_punctuation:
        result = _PUNCTUATION_KEEP_APOSTROPHE_RE.sub("", result)
    if active.expand_contractions:
        result = expand_contractions(result)
    return _WHITESPACE_RE.sub(" ", result).strip()


def _comparison_words(text: str, settings: ValidationSettings) -> list[str]:
    words = [word for word in normalize_for_comparison(text, settings).split(" ") if word]
    if settings.ignore_articles:
        words = [word for word in words if word not in IGNORABLE_WORDS]
    return words


def _uses_core_normalization(settings: ValidationSettings) -> bool:
    return settings.ignore_capitalization and settings.ignore_punctuation


def _literal_similarity(first: str, second: str) -> float:
    max_length = max(len(first), len(second))
    if max_length == 0:
        return PERFECT_SIMILARITY
    return ((max_length - levenshtein_distance(first, second)) / max_length) * PERFECT_SIMILARITY


def match_with_word_order_tolerance(
    guess: str,
    answer: str,
    settings: ValidationSettings | None = None,
) -> bool:
    """True when both texts hold the same words, in any order if allowed."""

    active = settings or ValidationSettings()
    guess_words = _comparison_words(guess, active)
    answer_words = _comparison_words(answer, active)

    if guess_words == answer_words:
        return True
    if not active.tolerate_word_order:
        return False
    return sorted(guess_words) == sorted(answer_words)


def validate_answer(
    guess: str,
    correct_answer: str,
    settings: ValidationSettings | None = None,
    matcher: StringSimilarityMatcher | None = None,
) -> AnswerVerdict:
    """Decide whether a guess should be accepted for a puzzle answer."""

    active = settings or ValidationSettings()
    engine = matcher or default_matcher()

    normalized_answer = engine.normalize(correct_answer)
    if not normalized_answer:
        raise ValueError("correct_answer must contain at least one letter or digit")

    word_results = engine.validate_words(guess, correct_answer, active.fuzzy_threshold)

    compared_guess = normalize_for_comparison(guess, active)
    compared_answer = normalize_for_comparison(correct_answer, active)
    # The core matcher always folds case and punctuation.
    lenient = _uses_core_normalization(active)

    is_exact = engine.normalize(guess) == normalized_answer if lenient else compared_guess == compared_answer
    if is_exact:
        logger.debug("Exact match for guess %r", guess)
        return AnswerVerdict(is_correct=True, confidence=1.0, method=METHOD_EXACT, word_results=word_results)

    if match_with_word_order_tolerance(guess, correct_answer, active):
        logger.debug("Word-order tolerant match for guess %r", guess)
        return AnswerVerdict(
            is_correct=True,
            confidence=1.0,
            method=METHOD_WORD_ORDER,
            reasoning="Same words as the answer",
            word_results=word_results,
        )

    if lenient:
        score = engine.similarity(compared_guess, compared_answer)
    else:
        score = _literal_similarity(compared_guess, compared_answer)
    confidence = score / PERFECT_SIMILARITY

    if score >= active.fuzzy_threshold:
        logger.debug("Fuzzy match for guess %r (similarity %.1f)", guess, score)
        return AnswerVerdict(
            is_correct=True,
            confidence=confidence,
            method=METHOD_FUZZY,
            reasoning="Close enough to correct answer (minor typo)",
            word_results=word_results,
        )

    suggestions: list[str] = []
    if score > SUGGESTION_MIN_SIMILARITY:
        letter_count = len(normalized_answer.replace(" ", ""))
        suggestions = ["Check your spelling", f"You're close! The answer has {letter_count} letters"]

    logger.debug("Rejected guess %r (similarity %.1f)", guess, score)
    return AnswerVerdict(
        is_correct=False,
        confidence=confidence,
        method=METHOD_FUZZY,
        suggestions=suggestions,
        word_results=word_results,
    )
