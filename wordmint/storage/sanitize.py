"""
Sanitizers for state loaded from storage.

Everything read back from disk is untrusted. The rules:
  - non-mapping input                -> defaults (None for the round)
  - missing/unknown/wrong-typed field -> that field's default
  - counters                         -> non-negative ints (bools, NaN, inf rejected),
                                        then games_won <= games_played and
                                        max_streak >= current_streak
  - enum-like fields out of set      -> default variant
  - guess_distribution               -> padded with 0 / truncated to MAX_ATTEMPTS
  - a solution or guess that is not exactly WORD_LENGTH letters (after case
    and accent folding, nothing dropped) throws the whole round away
  - evaluations and status are rebuilt from the guesses; stored ones are
    never trusted

None of these functions raise.
"""

from __future__ import annotations

import math
import re
import unicodedata
from typing import Any, List, Optional, Tuple

from wordmint.engine.constants import (
    DEFAULT_CONFIG, DEFAULT_LANGUAGE, DEFAULT_THEME, LANGUAGES, MAX_ATTEMPTS,
    THEMES, WORD_LENGTH, GameConfig,
)
from wordmint.engine.scoring import evaluate
from wordmint.engine.types import GameMode, RoundStatus
from wordmint.engine.validation import normalize_word
from wordmint.game.state import RoundState, SessionStats, Settings

_DATE_KEY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _non_negative_int(value: Any, fallback: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return fallback
    if isinstance(value, float) and not math.isfinite(value):
        return fallback
    return max(0, int(value))


def _flag(value: Any, fallback: bool = False) -> bool:
    return value if isinstance(value, bool) else fallback


def _choice(value: Any, allowed, fallback):
    return value if value in allowed else fallback


def _exact_word(value: Any) -> str:
    """
    Folded word, or "" when folding had to drop anything ("CR-ANE", "CRA NE").
    Only case and diacritics may differ from the stored text.
    """
    if not isinstance(value, str):
        return ""
    w = normalize_word(value)
    return w if len(w) == len(unicodedata.normalize("NFC", value)) else ""


def sanitize_settings(raw: Any) -> Settings:
    if not isinstance(raw, dict):
        return Settings()
    return Settings(
        color_blind_mode=_flag(raw.get("color_blind_mode")),
        hard_mode=_flag(raw.get("hard_mode")),
        theme=_choice(raw.get("theme"), THEMES, DEFAULT_THEME),
        language=_choice(raw.get("language"), LANGUAGES, DEFAULT_LANGUAGE),
    )


def sanitize_distribution(raw: Any, length: int = MAX_ATTEMPTS) -> tuple:
    if not isinstance(raw, list):
        return (0,) * length
    values = [_non_negative_int(v) for v in raw[:length]]
    values.extend([0] * (length - len(values)))
    return tuple(values)


def sanitize_recorded_rounds(raw: Any) -> Tuple[str, ...]:
    """Distinct non-empty string ids, first occurrence wins."""
    if not isinstance(raw, list):
        return ()
    seen = []
    for r in raw:
        if isinstance(r, str) and r and r not in seen:
            seen.append(r)
    return tuple(seen)


def sanitize_stats(raw: Any, max_attempts: int = MAX_ATTEMPTS) -> SessionStats:
    if not isinstance(raw, dict):
        return SessionStats(guess_distribution=(0,) * max_attempts)
    played = _non_negative_int(raw.get("games_played"))
    streak = _non_negative_int(raw.get("current_streak"))
    return SessionStats(
        games_played=played,
        games_won=min(_non_negative_int(raw.get("games_won")), played),
        current_streak=streak,
        max_streak=max(_non_negative_int(raw.get("max_streak")), streak),
        guess_distribution=sanitize_distribution(raw.get("guess_distribution"), max_attempts),
        recorded_rounds=sanitize_recorded_rounds(raw.get("recorded_rounds")),
    )


def sanitize_round(raw: Any, config: GameConfig = DEFAULT_CONFIG) -> Optional[RoundState]:
    """
    Repair a persisted round snapshot, or return None when it cannot be
    trusted at all.
    """
    if not isinstance(raw, dict):
        return None

    solution = _exact_word(raw.get("solution"))
    if len(solution) != WORD_LENGTH:
        return None

    guesses_raw = raw.get("guesses")
    guesses: List[str] = []
    if isinstance(guesses_raw, list):
        for g in guesses_raw:
            w = _exact_word(g)
            if len(w) != WORD_LENGTH:
                return None
            guesses.append(w)

    hard_mode = _flag(raw.get("hard_mode"))
    cap = config.attempt_cap(hard_mode)
    # nothing can follow the winning guess
    if solution in guesses:
        guesses = guesses[:guesses.index(solution) + 1]
    guesses = guesses[:cap]

    if guesses and guesses[-1] == solution:
        status = RoundStatus.WON
    elif len(guesses) >= cap:
        status = RoundStatus.LOST
    else:
        status = RoundStatus.PLAYING

    try:
        mode = GameMode(raw.get("mode"))
    except ValueError:
        mode = GameMode.PRACTICE
    date_key = raw.get("date_key")
    if not (isinstance(date_key, str) and _DATE_KEY.match(date_key)):
        date_key = None
    if mode is GameMode.DAILY and date_key is None:
        mode = GameMode.PRACTICE

    current = raw.get("current_input")
    current = normalize_word(current)[:WORD_LENGTH] if isinstance(current, str) else ""

    return RoundState(
        solution=solution,
        guesses=tuple(guesses),
        evaluations=tuple(evaluate(g, solution) for g in guesses),
        current_input=current if status is RoundStatus.PLAYING else "",
        status=status,
        attempt_index=len(guesses),
        hard_mode=hard_mode,
        mode=mode,
        date_key=date_key if mode is GameMode.DAILY else None,
        serial=_non_negative_int(raw.get("serial")),
    )
