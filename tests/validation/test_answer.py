from __future__ import annotations

import pytest

from rebuzzle.matching.similarity import StringSimilarityMatcher
from rebuzzle.validation.answer import (
    match_with_word_order_tolerance,
    normalize_for_comparison,
    validate_answer,
)
from rebuzzle.validation.config import ValidationSettings


def test_normalize_for_comparison_expands_contractions() -> None:
    assert normalize_for_comparison("Time flies when you're having fun!") == "time flies when you are having fun"


def test_normalize_for_comparison_respects_disabled_rules() -> None:
    settings = ValidationSettings(ignore_punctuation=False, expand_contractions=False, ignore_capitalization=False)

    assert normalize_for_comparison("  You're  Here! ", settings) == "You're Here!"


def test_word_order_tolerance() -> None:
    assert match_with_word_order_tolerance("When having fun, time flies", "Time flies when having fun") is True
    assert match_with_word_order_tolerance("time flies", "time flies when having fun") is False

    strict = ValidationSettings(tolerate_word_order=False)
    assert match_with_word_order_tolerance("fun having", "having fun", strict) is False
    assert match_with_word_order_tolerance("Having fun!", "having fun", strict) is True


def test_articles_are_ignored_only_when_enabled() -> None:
    assert match_with_word_order_tolerance("The answer", "answer") is False
    assert match_with_word_order_tolerance("The answer", "answer", ValidationSettings(ignore_articles=True)) is True


def test_exact_match_after_normalization() -> None:
    verdict = validate_answer("Piece of Cake!", "piece of cake", matcher=StringSimilarityMatcher())

    assert verdict.is_correct is True
    assert verdict.method == "exact"
    assert verdict.confidence == 1.0
    assert verdict.word_results == [True, True, True]


def test_reordered_or_contracted_guesses_are_accepted() -> None:
    matcher = StringSimilarityMatcher()

    reordered = validate_answer("cake of piece", "piece of cake", matcher=matcher)
    contracted = validate_answer(
        "Time flies when you are having fun",
        "Time flies when you're having fun",
        matcher=matcher,
    )

    assert reordered.is_correct is True
    assert reordered.method == "word-order"
    assert contracted.is_correct is True
    assert contracted.method == "word-order"


def test_minor_typo_is_accepted_as_fuzzy() -> None:
    verdict = validate_answer("sunfower", "sunflower", matcher=StringSimilarityMatcher())

    assert verdict.is_correct is True
    assert verdict.method == "fuzzy"
    assert verdict.confidence == pytest.approx(8 / 9)
    assert verdict.reasoning is not None


def test_close_but_wrong_guess_gets_suggestions() -> None:
    verdict = validate_answer("sunfl", "sunflower", matcher=StringSimilarityMatcher())

    assert verdict.is_correct is False
    assert verdict.confidence == pytest.approx(5 / 9)
    assert verdict.suggestions == ["Check your spelling", "You're close! The answer has 9 letters"]


def test_distant_guess_gets_no_suggestions() -> None:
    verdict = validate_answer("cat", "dog", matcher=StringSimilarityMatcher())

    assert verdict.is_correct is False
    assert verdict.suggestions == []
    assert verdict.word_results == [False]


def test_threshold_comes_from_settings() -> None:
    verdict = validate_answer(
        "sunfl",
        "sunflower",
        ValidationSettings(fuzzy_threshold=50),
        StringSimilarityMatcher(),
    )

    assert verdict.is_correct is True
    assert verdict.method == "fuzzy"


def test_blank_answer_is_rejected() -> None:
    with pytest.raises(ValueError, match="correct_answer"):
        validate_answer("anything", " ?! ")


def test_verdict_serializes_to_dict() -> None:
    payload = validate_answer("sunfower", "sunflower", matcher=StringSimilarityMatcher()).to_dict()

    assert payload["is_correct"] is True
    assert payload["method"] == "fuzzy"
    assert payload["word_results"] == [True]


def test_strict_case_and_punctuation_settings_reject_shouted_guess() -> None:
    strict = ValidationSettings(ignore_capitalization=False, ignore_punctuation=False)

    verdict = validate_answer("SUNFLOWER!!!", "sunflower", strict, StringSimilarityMatcher())

    assert verdict.is_correct is False
    assert verdict.method == "fuzzy"
    assert verdict.confidence == 0


def test_case_sensitive_setting_scores_capitals_as_edits() -> None:
    case_sensitive = ValidationSettings(ignore_capitalization=False)

    verdict = validate_answer("Sunflower", "sunflower", case_sensitive, StringSimilarityMatcher())

    assert verdict.method == "fuzzy"
    assert verdict.is_correct is True
    assert verdict.confidence == pytest.approx(8 / 9)


def test_contraction_expansion_keeps_case_when_capitalization_counts() -> None:
    settings = ValidationSettings(ignore_capitalization=False)

    assert normalize_for_comparison("You're Here", settings) == "you are Here"
