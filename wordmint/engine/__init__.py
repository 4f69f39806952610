from .constants import WORD_LENGTH, MAX_ATTEMPTS, GameConfig, DEFAULT_CONFIG
from .types import GuessEvaluation, LetterState, RoundStatus, GameMode
from .scoring import evaluate, pattern
from .keyboard import aggregate
from .constraints import Violation, find_violation, filter_candidates
from .validation import normalize_word, validate_guess

__all__ = [
    "WORD_LENGTH", "MAX_ATTEMPTS", "GameConfig", "DEFAULT_CONFIG",
    "GuessEvaluation", "LetterState", "RoundStatus", "GameMode",
    "evaluate", "pattern", "aggregate",
    "Violation", "find_violation", "filter_candidates",
    "normalize_word", "validate_guess",
]
