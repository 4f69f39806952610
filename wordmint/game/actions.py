"""
The closed set of round actions.

Each action is a small frozen dataclass; `reducer.reduce` dispatches on the
concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from wordmint.engine.types import GameMode


@dataclass(frozen=True)
class AddLetter:
    letter: str


@dataclass(frozen=True)
class RemoveLetter:
    pass


@dataclass(frozen=True)
class ClearGuess:
    pass


@dataclass(frozen=True)
class SubmitGuess:
    pass


@dataclass(frozen=True)
class SetMessage:
    message: Optional[str]


@dataclass(frozen=True)
class ResetGame:
    solution: str
    mode: GameMode = GameMode.PRACTICE
    date_key: Optional[str] = None
    language: Optional[str] = None


@dataclass(frozen=True)
class ToggleColorBlind:
    pass


@dataclass(frozen=True)
class ToggleHardMode:
    pass


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class SetLanguage:
    language: str


RoundAction = Union[
    AddLetter, RemoveLetter, ClearGuess, SubmitGuess, SetMessage, ResetGame,
    ToggleColorBlind, ToggleHardMode, ToggleTheme, SetLanguage,
]
