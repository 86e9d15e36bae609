"""Lenient answer validation for puzzle guesses."""

from .answer import AnswerVerdict, match_with_word_order_tolerance, normalize_for_comparison, validate_answer
from .config import ValidationSettings
from .contractions import expand_contractions

__all__ = [
    "AnswerVerdict",
    "ValidationSettings",
    "expand_contractions",
    "match_with_word_order_tolerance",
    "normalize_for_comparison",
    "validate_answer",
]
