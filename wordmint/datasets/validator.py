"""
Word-list validator.

What this module does:
- Validate one bundled word list (words_<lang>.txt).
- A line is valid when it normalizes (diacritics stripped, uppercased) to
  exactly N letters A–Z; blank lines are invalid.
- Detect duplicates (after normalization) and compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordmint.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("en", "wordmint/datasets/data/words_en.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib
import unicodedata

from wordmint.engine.constants import WORD_LENGTH
from wordmint.engine.validation import normalize_word


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list."""
    language: str
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after normalization
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _fingerprint(path: Path) -> str:
    # word lists are a few KB; hash the raw bytes, BOM and line endings included
    return hashlib.sha256(path.read_bytes()).hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Returns:
      (valid_words, invalid_count), valid words normalized to uppercase.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8-sig") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            nw = normalize_word(w)
            # reject anything that loses letters to normalization ("co-op")
            if len(nw) == N and len(nw) == len(unicodedata.normalize("NFC", w)):
                valid.append(nw)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(language: str, path: str | Path, N: int = WORD_LENGTH) -> Dict:
    """
    Validate the word list for `language`.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema). `passed`
        is strict: the file exists, has at least one valid word, and has no
        invalid or duplicate lines.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = WordlistReport(language, N, str(path), False, 0, 0, 0, "", False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = set(words)

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    rep = WordlistReport(
        language=language,
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_fingerprint(p),
        passed=bool(words) and invalid == 0 and len(words) == len(unique),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console/docs.

    Example:
        lang=en N=5 | words=403 (uniq=403, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"lang={report['language']} N={report['N']} "
        f"| words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| {status}"
    )
