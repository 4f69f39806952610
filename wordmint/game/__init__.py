from .state import GameState, RoundState, SessionStats, Settings, new_round
from .actions import (
    AddLetter, RemoveLetter, ClearGuess, SubmitGuess, SetMessage, ResetGame,
    ToggleColorBlind, ToggleHardMode, ToggleTheme, SetLanguage, RoundAction,
)
from .reducer import RoundContext, reduce, attempts_left
from .stats import (
    daily_identity, is_recorded, next_serial, record_result, round_identity, round_id_for, win_rate,
)
from .share import build_share_text

__all__ = [
    "GameState", "RoundState", "SessionStats", "Settings", "new_round",
    "AddLetter", "RemoveLetter", "ClearGuess", "SubmitGuess", "SetMessage", "ResetGame",
    "ToggleColorBlind", "ToggleHardMode", "ToggleTheme", "SetLanguage", "RoundAction",
    "RoundContext", "reduce", "attempts_left",
    "daily_identity", "is_recorded", "next_serial",
    "record_result", "round_identity", "round_id_for", "win_rate",
    "build_share_text",
]
