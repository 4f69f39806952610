"""
Localized user-facing messages.

The engine never formats text itself; validators and the reducer call through
a `Strings` instance picked with `get_strings(language)`.
"""

from __future__ import annotations

from typing import Dict, Union

from wordmint.engine.constants import DEFAULT_LANGUAGE

Attempts = Union[int, str]


class Strings:
    app_name = "WordMint"
    language = "en"

    not_enough_letters = "Not enough letters"
    not_in_word_list = "Not in word list"
    copied_to_clipboard = "Copied to clipboard"
    clipboard_unavailable = "Clipboard unavailable"
    nothing_to_share = "Finish the round to share it"
    daily_already_played = "You already played today's word"
    status_playing = "Make your next guess"
    status_won = "Great work!"
    status_lost = "Better luck next round"
    practice_label = "Random"
    daily_label = "Daily"

    def solved_in(self, attempts: int) -> str:
        return f"Solved in {attempts} {'try' if attempts == 1 else 'tries'}"

    def word_was(self, solution: str) -> str:
        return f"The word was {solution}"

    def hard_mode_position(self, position: int, letter: str) -> str:
        return f"Hard mode: position {position} must be {letter}"

    def hard_mode_include(self, count: int, letter: str) -> str:
        what = f"'{letter}'" if count == 1 else f"'{letter}'s"
        return f"Hard mode: include at least {count} {what}"

    def attempts_remaining(self, remaining: int) -> str:
        return "1 attempt left" if remaining == 1 else f"{remaining} attempts left"

    def share_header(self, mode_label: str, attempts: Attempts, max_attempts: int) -> str:
        return f"{self.app_name} {mode_label} {attempts}/{max_attempts}"


class PortugueseStrings(Strings):
    language = "pt"

    not_enough_letters = "Faltam letras"
    not_in_word_list = "Não está na lista de palavras"
    copied_to_clipboard = "Copiado para a área de transferência"
    clipboard_unavailable = "Área de transferência indisponível"
    nothing_to_share = "Termine a rodada para compartilhar"
    daily_already_played = "Você já jogou a palavra de hoje"
    status_playing = "Faça sua próxima tentativa"
    status_won = "Muito bem!"
    status_lost = "Boa sorte na próxima rodada"
    practice_label = "Aleatório"
    daily_label = "Diário"

    def solved_in(self, attempts: int) -> str:
        return f"Resolvido em {attempts} {'tentativa' if attempts == 1 else 'tentativas'}"

    def word_was(self, solution: str) -> str:
        return f"A palavra era {solution}"

    def hard_mode_position(self, position: int, letter: str) -> str:
        return f"Modo difícil: a posição {position} deve ser {letter}"

    def hard_mode_include(self, count: int, letter: str) -> str:
        noun = "letra" if count == 1 else "letras"
        return f"Modo difícil: inclua pelo menos {count} {noun} '{letter}'"

    def attempts_remaining(self, remaining: int) -> str:
        return "1 tentativa restante" if remaining == 1 else f"{remaining} tentativas restantes"


STRINGS: Dict[str, Strings] = {
    "pt": PortugueseStrings(),
    "en": Strings(),
}


def get_strings(language: str) -> Strings:
    """Strings for `language`, falling back to the default language."""
    return STRINGS.get(language, STRINGS[DEFAULT_LANGUAGE])
