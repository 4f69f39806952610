"""
Word normalization and lightweight guess validation.

Everything entering the engine goes through `normalize_word` first:
  - Unicode NFD decomposition, combining marks dropped ("PÃO" -> "PAO")
  - uppercased
  - anything outside A–Z removed

A guess is acceptable iff, after normalization, it has exact length N and the
word list knows it. Hard-mode rules are checked separately (constraints.py).
"""

from __future__ import annotations

import re
import unicodedata
from typing import Callable

from .constants import WORD_LENGTH

_NON_ALPHA = re.compile(r"[^A-Z]")


def normalize_word(value: str) -> str:
    """Case-fold to uppercase, strip diacritics and drop non A–Z characters."""
    if not isinstance(value, str):
        return ""
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_ALPHA.sub("", stripped.upper())


def validate_guess(word: str, is_member: Callable[[str], bool], N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a valid guess.

    Args:
      word      : proposed guess (raw user text is fine)
      is_member : membership test from the word provider
      N         : required word length
    """
    w = normalize_word(word)
    if len(w) != N:
        return False
    return bool(is_member(w))
