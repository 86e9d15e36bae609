"""CLI entrypoint for checking a guess against a puzzle answer."""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging

from dotenv import load_dotenv

from rebuzzle.matching.similarity import default_matcher
from rebuzzle.validation.answer import validate_answer
from rebuzzle.validation.config import ValidationSettings


load_dotenv()

LOGGER = logging.getLogger(__name__)

EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_CONFIG_ERROR = 2


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check a player's guess against a puzzle answer")
    parser.add_argument("--guess", required=True, help="Guess exactly as the player typed it")
    parser.add_argument("--answer", required=True, help="Canonical puzzle answer")
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Fuzzy acceptance threshold in percent (overrides REBUZZLE_FUZZY_THRESHOLD)",
    )
    parser.add_argument("--words", action="store_true", help="Include per-word feedback in the output")
    parser.add_argument("--verbose", action="store_true", help="Log matching decisions to stderr")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        settings = ValidationSettings.from_env()
        if args.threshold is not None:
            if not 0.0 <= args.threshold <= 100.0:
                raise ValueError("--threshold must be between 0 and 100")
            settings = replace(settings, fuzzy_threshold=args.threshold)
        verdict = validate_answer(args.guess, args.answer, settings)
    except ValueError as exc:
        LOGGER.error("Cannot check answer: %s", exc)
        return EXIT_CONFIG_ERROR

    matcher = default_matcher()
    payload: dict[str, object] = {
        "guess": args.guess,
        "answer": args.answer,
        "threshold": settings.fuzzy_threshold,
        "similarity": round(verdict.confidence * 100, 2),
        "is_correct": verdict.is_correct,
        "confidence": round(verdict.confidence, 4),
        "method": verdict.method,
        "reasoning": verdict.reasoning,
        "suggestions": verdict.suggestions,
    }
    if args.words:
        guess_words = [word for word in matcher.normalize(args.guess).split(" ") if word]
        payload["words"] = [
            {"word": word, "correct": correct} for word, correct in zip(guess_words, verdict.word_results)
        ]

    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return EXIT_ACCEPTED if verdict.is_correct else EXIT_REJECTED


if __name__ == "__main__":
    raise SystemExit(main())
