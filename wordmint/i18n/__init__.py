from .strings import Strings, PortugueseStrings, STRINGS, get_strings

__all__ = ["Strings", "PortugueseStrings", "STRINGS", "get_strings"]
