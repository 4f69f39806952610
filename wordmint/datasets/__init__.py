from .validator import validate_wordlist, pretty_summary
from .io import read_lines, read_wordlist, unique_words
from .provider import WordProvider, FileWordProvider, StaticWordProvider, date_key

__all__ = [
    "validate_wordlist", "pretty_summary", "read_lines", "read_wordlist", "unique_words",
    "WordProvider", "FileWordProvider", "StaticWordProvider", "date_key",
]
