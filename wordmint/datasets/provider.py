"""
Word provider: the game's only window into the word corpus.

The core asks for a random (or date-keyed) solution and for membership of a
candidate; it never walks the list itself. `FileWordProvider` serves the
lists bundled under data/, loading each language lazily and once.
"""

from __future__ import annotations

import datetime as dt
import logging
import random
from pathlib import Path
from typing import Dict, List, Optional, Set

from wordmint.engine.constants import WORD_LENGTH
from wordmint.engine.validation import normalize_word

from .io import read_wordlist, unique_words
from .validator import pretty_summary, validate_wordlist

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
FALLBACK_LANGUAGE = "en"

# Day zero for daily puzzles; the index advances by one word per day.
DAILY_EPOCH = dt.date(2024, 1, 1)


class WordProvider:
    """Interface consumed by the game."""

    def words(self, language: str) -> List[str]:
        raise NotImplementedError("Override in subclass")

    def random_word(self, language: str) -> str:
        raise NotImplementedError("Override in subclass")

    def is_member(self, candidate: str, language: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def daily_word(self, language: str, date: dt.date) -> str:
        raise NotImplementedError("Override in subclass")


class FileWordProvider(WordProvider):
    def __init__(self, data_dir: Path | str = DATA_DIR, *, seed: int | None = None,
                 N: int = WORD_LENGTH):
        self.data_dir = Path(data_dir)
        self.N = N
        self.rng = random.Random(seed)
        self._lists: Dict[str, List[str]] = {}
        self._sets: Dict[str, Set[str]] = {}

    def path_for(self, language: str) -> Path:
        return self.data_dir / f"words_{language}.txt"

    def _resolve(self, language: str) -> str:
        if language in self._lists or self.path_for(language).exists():
            return language
        logger.warning("no word list for language %r; using %r", language, FALLBACK_LANGUAGE)
        return FALLBACK_LANGUAGE

    def words(self, language: str) -> List[str]:
        """Normalized word list for `language` (unknown languages fall back)."""
        language = self._resolve(language)
        if language not in self._lists:
            path = self.path_for(language)
            report = validate_wordlist(language, path, self.N)
            if report["passed"]:
                logger.debug(pretty_summary(report))
            else:
                logger.warning("%s %s", pretty_summary(report), "; ".join(report["issues"]))
            words = read_wordlist(path, self.N)
            if not words:
                raise ValueError(f"word list for {language!r} is empty: {path}")
            self._lists[language] = words
            self._sets[language] = set(words)
        return self._lists[language]

    def random_word(self, language: str) -> str:
        words = self.words(language)
        return words[self.rng.randrange(len(words))]

    def is_member(self, candidate: str, language: str) -> bool:
        self.words(language)
        return normalize_word(candidate) in self._sets[self._resolve(language)]

    def daily_word(self, language: str, date: dt.date) -> str:
        words = self.words(language)
        return words[(date - DAILY_EPOCH).days % len(words)]


class StaticWordProvider(WordProvider):
    """In-memory provider over a fixed word collection, for tests and the harness."""

    def __init__(self, words, *, seed: int | None = None, N: int = WORD_LENGTH):
        self._words = unique_words(words, N)
        if not self._words:
            raise ValueError("StaticWordProvider needs at least one valid word")
        self._set = set(self._words)
        self.rng = random.Random(seed)

    def words(self, language: str = FALLBACK_LANGUAGE) -> List[str]:
        return self._words

    def random_word(self, language: str) -> str:
        return self._words[self.rng.randrange(len(self._words))]

    def is_member(self, candidate: str, language: str) -> bool:
        return normalize_word(candidate) in self._set

    def daily_word(self, language: str, date: dt.date) -> str:
        return self._words[(date - DAILY_EPOCH).days % len(self._words)]


def date_key(date: Optional[dt.date] = None) -> str:
    """ISO date string used as the daily round identity."""
    return (date or dt.date.today()).isoformat()
