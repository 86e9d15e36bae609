"""Runtime configuration for answer validation."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from rebuzzle.matching.similarity import DEFAULT_FUZZY_THRESHOLD


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(*, name: str, raw_value: str) -> bool:
    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of: {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}")


def _parse_percentage(*, name: str, raw_value: str) -> float:
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc
    if not 0.0 <= value <= 100.0:
        raise ValueError(f"{name} must be between 0 and 100")
    return value


@dataclass(frozen=True, slots=True)
class ValidationSettings:
    """Validated knobs for lenient answer checking."""

    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD
    tolerate_word_order: bool = True
    expand_contractions: bool = True
    ignore_punctuation: bool = True
    ignore_capitalization: bool = True
    ignore_articles: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ValidationSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        threshold_raw = source.get("REBUZZLE_FUZZY_THRESHOLD", str(DEFAULT_FUZZY_THRESHOLD)).strip()
        if not threshold_raw:
            raise ValueError("REBUZZLE_FUZZY_THRESHOLD cannot be empty")

        flags: dict[str, bool] = {}
        for field_name, env_name, default in (
            ("tolerate_word_order", "REBUZZLE_TOLERATE_WORD_ORDER", "true"),
            ("expand_contractions", "REBUZZLE_EXPAND_CONTRACTIONS", "true"),
            ("ignore_punctuation", "REBUZZLE_IGNORE_PUNCTUATION", "true"),
            ("ignore_capitalization", "REBUZZLE_IGNORE_CAPITALIZATION", "true"),
            ("ignore_articles", "REBUZZLE_IGNORE_ARTICLES", "false"),
        ):
            raw_value = source.get(env_name, default).strip()
            if not raw_value:
                raise ValueError(f"{env_name} cannot be empty")
            flags[field_name] = _parse_bool(name=env_name, raw_value=raw_value)

        return cls(
            fuzzy_threshold=_parse_percentage(name="REBUZZLE_FUZZY_THRESHOLD", raw_value=threshold_raw),
            **flags,
        )
