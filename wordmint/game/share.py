"""
Shareable result text: a header line and one glyph row per guess.

Output only, never parsed back.
"""

from __future__ import annotations

from typing import Iterable, Optional

from wordmint.engine.constants import MAX_ATTEMPTS
from wordmint.engine.types import GameMode, GuessEvaluation, LetterState, RoundStatus
from wordmint.i18n import Strings

GLYPHS = {
    LetterState.CORRECT: "🟩",
    LetterState.PRESENT: "🟨",
    LetterState.ABSENT: "⬛",
    LetterState.EMPTY: "⬛",
}

COLOR_BLIND_GLYPHS = {
    LetterState.CORRECT: "🟧",
    LetterState.PRESENT: "🟦",
    LetterState.ABSENT: "⬛",
    LetterState.EMPTY: "⬛",
}


def build_share_text(
        *,
        mode: GameMode,
        date_key: Optional[str],
        status: RoundStatus,
        evaluations: Iterable[GuessEvaluation],
        strings: Strings,
        max_attempts: int = MAX_ATTEMPTS,
        color_blind: bool = False,
) -> str:
    evaluations = list(evaluations)
    if status is RoundStatus.WON:
        attempts = len(evaluations)
    elif status is RoundStatus.LOST:
        attempts = "X"
    else:
        attempts = "-"

    if mode is GameMode.DAILY and date_key:
        label = f"{strings.daily_label} {date_key}"
    else:
        label = strings.practice_label

    glyphs = COLOR_BLIND_GLYPHS if color_blind else GLYPHS
    header = strings.share_header(label, attempts, max_attempts)
    grid = "\n".join("".join(glyphs[s] for s in ev.states) for ev in evaluations)
    return f"{header}\n{grid}".strip()
