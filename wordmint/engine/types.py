"""
Value types shared by the engine, the game reducer and storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class LetterState(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    EMPTY = "empty"

    @property
    def rank(self) -> int:
        """Ordering used for best-known merges: empty < absent < present < correct."""
        return _RANK[self]


_RANK = {
    LetterState.EMPTY: 0,
    LetterState.ABSENT: 1,
    LetterState.PRESENT: 2,
    LetterState.CORRECT: 3,
}


class RoundStatus(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GameMode(str, Enum):
    PRACTICE = "practice"
    DAILY = "daily"


@dataclass(frozen=True)
class GuessEvaluation:
    """Per-letter scoring of one guess. `letters` may contain the blank sentinel."""
    letters: Tuple[str, ...]
    states: Tuple[LetterState, ...]

    def __post_init__(self):
        if len(self.letters) != len(self.states):
            raise ValueError("letters and states must have the same length")

    def __iter__(self) -> Iterator[Tuple[str, LetterState]]:
        return iter(zip(self.letters, self.states))

    def __len__(self) -> int:
        return len(self.letters)

    @property
    def word(self) -> str:
        return "".join(self.letters).strip()

    def to_dict(self) -> dict:
        return {
            "letters": list(self.letters),
            "states": [s.value for s in self.states],
        }
