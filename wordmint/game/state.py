"""
Round, settings and stats values.

All three are frozen; every transition builds a new value with
`dataclasses.replace`. Invariants of RoundState:
  - len(guesses) == len(evaluations) == attempt_index
  - status only moves playing -> won / lost
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from wordmint.engine.constants import (
    DEFAULT_LANGUAGE, DEFAULT_THEME, MAX_ATTEMPTS,
)
from wordmint.engine.types import GameMode, GuessEvaluation, RoundStatus


@dataclass(frozen=True)
class Settings:
    color_blind_mode: bool = False
    hard_mode: bool = False
    theme: str = DEFAULT_THEME
    language: str = DEFAULT_LANGUAGE

    def to_dict(self) -> dict:
        return {
            "color_blind_mode": self.color_blind_mode,
            "hard_mode": self.hard_mode,
            "theme": self.theme,
            "language": self.language,
        }


@dataclass(frozen=True)
class RoundState:
    solution: str
    guesses: Tuple[str, ...] = ()
    evaluations: Tuple[GuessEvaluation, ...] = ()
    current_input: str = ""
    status: RoundStatus = RoundStatus.PLAYING
    attempt_index: int = 0
    hard_mode: bool = False
    message: Optional[str] = None
    mode: GameMode = GameMode.PRACTICE
    date_key: Optional[str] = None
    # bumped on every reset so two rounds with the same word stay distinct
    serial: int = 0

    @property
    def is_over(self) -> bool:
        return self.status is not RoundStatus.PLAYING

    def to_dict(self) -> dict:
        """Persisted snapshot. The transient message is not stored."""
        return {
            "solution": self.solution,
            "guesses": list(self.guesses),
            "evaluations": [ev.to_dict() for ev in self.evaluations],
            "current_input": self.current_input,
            "status": self.status.value,
            "attempt_index": self.attempt_index,
            "hard_mode": self.hard_mode,
            "mode": self.mode.value,
            "date_key": self.date_key,
            "serial": self.serial,
        }


@dataclass(frozen=True)
class SessionStats:
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    guess_distribution: Tuple[int, ...] = field(default=(0,) * MAX_ATTEMPTS)
    recorded_rounds: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "games_played": self.games_played,
            "games_won": self.games_won,
            "current_streak": self.current_streak,
            "max_streak": self.max_streak,
            "guess_distribution": list(self.guess_distribution),
            "recorded_rounds": list(self.recorded_rounds),
        }


@dataclass(frozen=True)
class GameState:
    """What the reducer transforms: the live round plus the player's settings."""
    round: RoundState
    settings: Settings = field(default_factory=Settings)


def new_round(solution: str, *, hard_mode: bool = False, mode: GameMode = GameMode.PRACTICE,
              date_key: Optional[str] = None, serial: int = 0) -> RoundState:
    return RoundState(
        solution=solution,
        hard_mode=hard_mode,
        mode=mode,
        date_key=date_key if mode is GameMode.DAILY else None,
        serial=serial,
    )
