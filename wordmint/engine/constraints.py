"""
Constraints derived from the evaluation history.

Two consumers:
  - hard mode: `find_violation` tells whether a candidate guess reuses every
    letter/position already revealed.
  - the self-play bot: `filter_candidates` keeps words that would reproduce
    every recorded evaluation exactly.

Hard-mode rules, collected over ALL prior evaluations:
  - positional: index -> letter, for every `correct` ever seen. Later guesses
    never erase an earlier green.
  - counts: letter -> minimum occurrences, the MAX over single guesses of the
    number of `correct` + `present` marks for that letter (not the sum).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .constants import BLANK, WORD_LENGTH
from .scoring import evaluate
from .types import GuessEvaluation, LetterState
from .validation import normalize_word

POSITION = "position"
COUNT = "count"


@dataclass(frozen=True)
class Violation:
    """
    First hard-mode rule a candidate breaks.

    `position` is 0-based; messages show it 1-based.
    """
    kind: str
    letter: str
    position: int = -1
    count: int = 0

    def message(self, strings) -> str:
        if self.kind == POSITION:
            return strings.hard_mode_position(self.position + 1, self.letter)
        return strings.hard_mode_include(self.count, self.letter)


def derive_constraints(
        history: Iterable[GuessEvaluation],
) -> Tuple[Dict[int, str], Dict[str, int]]:
    """
    Return (required_positions, required_counts) for the given history.

    required_counts keeps first-seen insertion order, which decides which
    letter is reported first.
    """
    positions: Dict[int, str] = {}
    counts: Dict[str, int] = {}

    for evaluation in history:
        this_guess: Dict[str, int] = {}
        for index, (letter, state) in enumerate(evaluation):
            if not letter or letter == BLANK:
                continue
            if state is LetterState.CORRECT:
                positions[index] = letter
            if state in (LetterState.CORRECT, LetterState.PRESENT):
                this_guess[letter] = this_guess.get(letter, 0) + 1
        for letter, n in this_guess.items():
            counts[letter] = max(counts.get(letter, 0), n)

    return positions, counts


def find_violation(candidate: str, history: Iterable[GuessEvaluation]) -> Optional[Violation]:
    """
    Check `candidate` against hard-mode rules.

    Positional rules are checked first and the lowest index wins; count rules
    only once every position is satisfied. Returns None when the candidate
    honors both.
    """
    positions, counts = derive_constraints(history)
    if not positions and not counts:
        return None

    letters = normalize_word(candidate).ljust(WORD_LENGTH, BLANK)[:WORD_LENGTH]

    for index in sorted(positions):
        required = positions[index]
        if letters[index] != required:
            return Violation(kind=POSITION, letter=required, position=index)

    have: Dict[str, int] = {}
    for ch in letters:
        if ch != BLANK:
            have[ch] = have.get(ch, 0) + 1

    for letter, required in counts.items():
        if have.get(letter, 0) < required:
            return Violation(kind=COUNT, letter=letter, count=required)

    return None


def filter_candidates(words: Iterable[str], history: Iterable[GuessEvaluation]) -> List[str]:
    """
    Keep only words that would produce exactly the recorded evaluations.

    Args:
      words   : iterable of candidate words (normalized on the fly)
      history : evaluations seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for raw in words:
        w = normalize_word(raw)
        if len(w) != WORD_LENGTH:
            continue

        # Scoring the old guess against this candidate must reproduce the
        # recorded states.
        if all(evaluate(ev.word, w).states == ev.states for ev in history):
            out.append(w)

    return out
