"""
Word-list file helpers.

Bundled lists (`data/words_<lang>.txt`) hold one word per line, lowercase or
with accents as written in the language; everything is folded to the A-Z
uppercase form the engine compares against.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from wordmint.engine.constants import WORD_LENGTH
from wordmint.engine.validation import normalize_word


def read_lines(p: Path | str) -> List[str]:
    """
    Lines of a UTF-8 word list, without line endings or a leading BOM.
    A missing file raises FileNotFoundError.
    """
    text = Path(p).read_text(encoding="utf-8-sig")
    return text.splitlines()


def unique_words(words: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    """
    Normalize every entry, keep N-letter words only and drop duplicates while
    preserving the original order.
    """
    seen = set()
    out: List[str] = []
    for raw in words:
        w = normalize_word(raw)
        if len(w) == N and w not in seen:
            seen.add(w)
            out.append(w)
    return out


def read_wordlist(p: Path | str, N: int = WORD_LENGTH) -> List[str]:
    """Load a word list file through `unique_words`."""
    return unique_words(read_lines(p), N)
