"""
Best-known state per letter, for the on-screen keyboard hints.
"""

from __future__ import annotations

from typing import Dict, Iterable

from .constants import BLANK
from .types import GuessEvaluation, LetterState


def aggregate(evaluations: Iterable[GuessEvaluation]) -> Dict[str, LetterState]:
    """
    Fold every evaluation into letter -> highest-ranked state seen.

    A letter never downgrades, so the result does not depend on the order of
    `evaluations`. Blank positions are skipped.
    """
    best: Dict[str, LetterState] = {}
    for evaluation in evaluations:
        for letter, state in evaluation:
            if not letter or letter == BLANK:
                continue
            prev = best.get(letter, LetterState.EMPTY)
            best[letter] = state if state.rank > prev.rank else prev
    return best
