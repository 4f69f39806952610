"""
Wordle-style scoring (feedback) for a single (guess, solution) pair.

States:
  - correct : right letter in the right position
  - present : letter occurs elsewhere in the solution
  - absent  : letter not present (or present fewer times than guessed)
  - empty   : padded blank position of a short guess

Algorithm (two-pass, duplicate-safe):
  1) Count the solution's letters. Mark every positional match `correct` and
     consume one instance of that letter.
  2) For the remaining positions mark blanks `empty`, letters that still have
     a remaining instance `present` (consuming it), everything else `absent`.

Matching greens first keeps a duplicated guess letter from taking a `present`
that belongs to an aligned occurrence.
"""

from __future__ import annotations

from collections import Counter
from typing import List

from .constants import BLANK, WORD_LENGTH
from .types import GuessEvaluation, LetterState
from .validation import normalize_word

# Compact one-char-per-letter rendering, used in reports and the harness.
PATTERN_CHARS = {
    LetterState.CORRECT: "G",
    LetterState.PRESENT: "Y",
    LetterState.ABSENT: "-",
    LetterState.EMPTY: ".",
}


def evaluate(guess: str, solution: str) -> GuessEvaluation:
    """
    Score `guess` against `solution`.

    The guess is normalized, right-padded with blanks to WORD_LENGTH and
    truncated to it. The solution must normalize to exactly WORD_LENGTH
    letters.

    Examples:
      evaluate("TRACE", "CRANE") -> absent, correct, correct, present, correct
      evaluate("BELLE", "LEVEL") -> absent, correct, present, present, present
    """
    clean_solution = normalize_word(solution)
    if len(clean_solution) != WORD_LENGTH:
        raise ValueError(f"solution must have {WORD_LENGTH} letters; got {solution!r}")

    letters = list(normalize_word(guess).ljust(WORD_LENGTH, BLANK)[:WORD_LENGTH])
    states: List[LetterState] = [LetterState.ABSENT] * WORD_LENGTH
    remaining = Counter(clean_solution)

    # Pass 1: greens consume their letter first.
    for i, (g, s) in enumerate(zip(letters, clean_solution)):
        if g == s:
            states[i] = LetterState.CORRECT
            remaining[g] -= 1

    # Pass 2: blanks, then yellows capped by what is left.
    for i, g in enumerate(letters):
        if states[i] is LetterState.CORRECT:
            continue
        if g == BLANK:
            states[i] = LetterState.EMPTY
        elif remaining[g] > 0:
            states[i] = LetterState.PRESENT
            remaining[g] -= 1

    return GuessEvaluation(letters=tuple(letters), states=tuple(states))


def pattern(evaluation: GuessEvaluation) -> str:
    """Render an evaluation as a G/Y/-/. string, e.g. "-GGYG"."""
    return "".join(PATTERN_CHARS[s] for s in evaluation.states)
