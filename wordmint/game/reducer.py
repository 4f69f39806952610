"""
Round state machine.

`reduce(state, action, ctx)` is a pure transition: it returns the next
GameState and never touches storage, the clock or the clipboard. Everything
it needs from the outside world comes in through `RoundContext`:
  - is_member(word, language): word-list membership
  - strings(language):         localized message provider
  - config:                    attempt cap and friends

Handlers register per action type with @handles, mirroring a registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Type

from wordmint.engine.constants import BLANK, DEFAULT_CONFIG, LANGUAGES, THEMES, WORD_LENGTH, GameConfig
from wordmint.engine.constraints import find_violation
from wordmint.engine.scoring import evaluate
from wordmint.engine.types import RoundStatus
from wordmint.engine.validation import normalize_word, validate_guess
from wordmint.i18n import Strings, get_strings

from .actions import (
    AddLetter, ClearGuess, RemoveLetter, ResetGame, SetLanguage, SetMessage,
    SubmitGuess, ToggleColorBlind, ToggleHardMode, ToggleTheme,
)
from .state import GameState, new_round


@dataclass(frozen=True)
class RoundContext:
    is_member: Callable[[str, str], bool]
    strings: Callable[[str], Strings] = get_strings
    config: GameConfig = field(default=DEFAULT_CONFIG)


Handler = Callable[[GameState, object, RoundContext], GameState]
_HANDLERS: Dict[Type, Handler] = {}


def handles(action_type: Type) -> Callable[[Handler], Handler]:
    """Decorator: register a transition function for one action type."""
    def deco(fn: Handler) -> Handler:
        if action_type in _HANDLERS:
            raise ValueError(f"Duplicate handler for {action_type.__name__}")
        _HANDLERS[action_type] = fn
        return fn
    return deco


def reduce(state: GameState, action, ctx: RoundContext) -> GameState:
    try:
        handler = _HANDLERS[type(action)]
    except KeyError as e:
        raise TypeError(f"Unknown action: {action!r}") from e
    return handler(state, action, ctx)


def _with_round(state: GameState, **changes) -> GameState:
    return replace(state, round=replace(state.round, **changes))


def _with_message(state: GameState, message) -> GameState:
    return _with_round(state, message=message)


@handles(AddLetter)
def _add_letter(state: GameState, action: AddLetter, ctx: RoundContext) -> GameState:
    rnd = state.round
    if rnd.is_over or len(rnd.current_input) >= WORD_LENGTH:
        return state
    letter = normalize_word(action.letter)
    if len(letter) != 1:
        return state
    return _with_round(state, current_input=rnd.current_input + letter)


@handles(RemoveLetter)
def _remove_letter(state: GameState, action: RemoveLetter, ctx: RoundContext) -> GameState:
    rnd = state.round
    if rnd.is_over or not rnd.current_input:
        return state
    return _with_round(state, current_input=rnd.current_input[:-1])


@handles(ClearGuess)
def _clear_guess(state: GameState, action: ClearGuess, ctx: RoundContext) -> GameState:
    rnd = state.round
    if rnd.is_over or not rnd.current_input:
        return state
    return _with_round(state, current_input="")


@handles(SubmitGuess)
def _submit_guess(state: GameState, action: SubmitGuess, ctx: RoundContext) -> GameState:
    rnd = state.round
    if rnd.is_over:
        return state

    # Out of attempts (e.g. a tighter hard-mode cap switched on mid-round)
    # behaves like a finished round.
    cap = ctx.config.attempt_cap(rnd.hard_mode)
    if rnd.attempt_index >= cap:
        return state

    language = state.settings.language
    strings = ctx.strings(language)
    guess = normalize_word(rnd.current_input)

    if len(guess) != WORD_LENGTH:
        return _with_message(state, strings.not_enough_letters)

    # Hard mode first so its message wins over "not in word list".
    if rnd.hard_mode:
        violation = find_violation(guess, rnd.evaluations)
        if violation is not None:
            return _with_message(state, violation.message(strings))

    if not validate_guess(guess, lambda w: ctx.is_member(w, language)):
        return _with_message(state, strings.not_in_word_list)

    evaluation = evaluate(guess, rnd.solution)
    attempt = min(rnd.attempt_index + 1, cap)

    if guess == normalize_word(rnd.solution):
        status, message = RoundStatus.WON, strings.solved_in(attempt)
    elif attempt >= cap:
        status, message = RoundStatus.LOST, strings.word_was(rnd.solution)
    else:
        status, message = RoundStatus.PLAYING, None

    return _with_round(
        state,
        guesses=rnd.guesses + (guess,),
        evaluations=rnd.evaluations + (evaluation,),
        current_input="",
        attempt_index=attempt,
        status=status,
        message=message,
    )


@handles(SetMessage)
def _set_message(state: GameState, action: SetMessage, ctx: RoundContext) -> GameState:
    if state.round.message == action.message:
        return state
    return _with_message(state, action.message)


@handles(ResetGame)
def _reset_game(state: GameState, action: ResetGame, ctx: RoundContext) -> GameState:
    settings = state.settings
    if action.language and action.language != settings.language:
        settings = replace(settings, language=action.language)
    solution = normalize_word(action.solution)
    if len(solution) != WORD_LENGTH:
        raise ValueError(f"solution must have {WORD_LENGTH} letters; got {action.solution!r}")
    rnd = new_round(
        solution,
        hard_mode=settings.hard_mode,
        mode=action.mode,
        date_key=action.date_key,
        serial=state.round.serial + 1,
    )
    return GameState(round=rnd, settings=settings)


@handles(ToggleColorBlind)
def _toggle_color_blind(state: GameState, action, ctx: RoundContext) -> GameState:
    return replace(state, settings=replace(state.settings,
                                           color_blind_mode=not state.settings.color_blind_mode))


@handles(ToggleHardMode)
def _toggle_hard_mode(state: GameState, action, ctx: RoundContext) -> GameState:
    # Already-submitted guesses stay as they are; only future submissions and
    # the cap comparison see the new flag.
    hard = not state.settings.hard_mode
    return GameState(
        round=replace(state.round, hard_mode=hard),
        settings=replace(state.settings, hard_mode=hard),
    )


@handles(ToggleTheme)
def _toggle_theme(state: GameState, action, ctx: RoundContext) -> GameState:
    theme = THEMES[1] if state.settings.theme == THEMES[0] else THEMES[0]
    return replace(state, settings=replace(state.settings, theme=theme))


@handles(SetLanguage)
def _set_language(state: GameState, action: SetLanguage, ctx: RoundContext) -> GameState:
    if action.language not in LANGUAGES or action.language == state.settings.language:
        return state
    return replace(state, settings=replace(state.settings, language=action.language))


def attempts_left(state: GameState, config: GameConfig = DEFAULT_CONFIG) -> int:
    rnd = state.round
    if rnd.is_over:
        return 0
    return max(0, config.attempt_cap(rnd.hard_mode) - rnd.attempt_index)


def padded_input(state: GameState) -> str:
    """Current input padded with blanks, as the board renders the active row."""
    return state.round.current_input.ljust(WORD_LENGTH, BLANK)
