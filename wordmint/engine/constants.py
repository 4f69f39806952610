"""
Game rule constants and tunables.

Single source of truth for the word length and the attempt cap. Anything
that may vary per run (hard-mode cap, message lifetime) lives on GameConfig.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

WORD_LENGTH = 5
MAX_ATTEMPTS = 6

# Sentinel used to pad short guesses up to WORD_LENGTH.
BLANK = " "

LANGUAGES = ("pt", "en")
DEFAULT_LANGUAGE = "pt"
THEMES = ("dark", "light")
DEFAULT_THEME = "dark"


@dataclass(frozen=True)
class GameConfig:
    max_attempts: int = MAX_ATTEMPTS
    # None means hard mode shares the standard cap. It can only tighten it.
    hard_mode_max_attempts: Optional[int] = None
    message_ttl: float = 2.0

    def attempt_cap(self, hard_mode: bool) -> int:
        if hard_mode and self.hard_mode_max_attempts is not None:
            return max(1, min(self.max_attempts, self.hard_mode_max_attempts))
        return self.max_attempts


DEFAULT_CONFIG = GameConfig()
