"""
The calling layer around the pure reducer.

A Session owns the live GameState and SessionStats and performs all the side
effects the reducer must not: loading and sanitizing persisted state, writing
it back after every change, recording finished rounds, the clipboard write
for sharing, and expiring transient messages.
"""

from __future__ import annotations

import datetime as dt
import logging
import time
from typing import Callable, Dict, Optional

from wordmint.datasets.provider import WordProvider, date_key as make_date_key
from wordmint.engine.constants import DEFAULT_CONFIG, GameConfig
from wordmint.engine.keyboard import aggregate
from wordmint.engine.types import GameMode, LetterState
from wordmint.i18n import Strings, get_strings
from wordmint.storage.sanitize import sanitize_round, sanitize_settings, sanitize_stats
from wordmint.storage.store import GAME_STATE_KEY, SETTINGS_KEY, STATS_KEY, MemoryStore

from .actions import (
    AddLetter, RemoveLetter, ResetGame, SetLanguage, SetMessage, SubmitGuess,
)
from .reducer import RoundContext, reduce
from .share import build_share_text
from .state import GameState, SessionStats, new_round
from .stats import daily_identity, is_recorded, next_serial, record_result, round_id_for

logger = logging.getLogger(__name__)

ENTER_KEYS = {"ENTER", "RETURN"}
BACKSPACE_KEYS = {"BACKSPACE", "BACK", "DEL"}


class Session:
    def __init__(
            self,
            provider: WordProvider,
            store=None,
            *,
            config: GameConfig = DEFAULT_CONFIG,
            clock: Callable[[], float] = time.monotonic,
            today: Callable[[], dt.date] = dt.date.today,
            clipboard: Optional[Callable[[str], None]] = None,
    ):
        self.provider = provider
        self.store = store if store is not None else MemoryStore()
        self.config = config
        self.clock = clock
        self.today = today
        self.clipboard = clipboard
        self.ctx = RoundContext(is_member=provider.is_member, strings=get_strings, config=config)
        self.state: Optional[GameState] = None
        self.stats = SessionStats(guess_distribution=(0,) * config.max_attempts)
        self.message_deadline: Optional[float] = None

    # ---- lifecycle ----

    def start(self, mode: GameMode = GameMode.PRACTICE) -> GameState:
        """
        Load settings, stats and the saved round. A missing or invalid round,
        a round of a different mode, or a stale daily round starts fresh.
        Asking for a daily word that was already finished today falls back to
        practice.
        """
        settings = sanitize_settings(self.store.load(SETTINGS_KEY))
        self.stats = sanitize_stats(self.store.load(STATS_KEY), self.config.max_attempts)
        saved = sanitize_round(self.store.load(GAME_STATE_KEY), self.config)
        today = make_date_key(self.today())

        replay = mode is GameMode.DAILY and self._daily_done() and not (
                saved is not None and saved.mode is GameMode.DAILY and saved.date_key == today)
        if replay:
            logger.info("daily word for %s already recorded; playing practice", today)
            mode = GameMode.PRACTICE

        if saved is None or saved.mode is not mode or (
                mode is GameMode.DAILY and saved.date_key != today):
            if saved is None:
                logger.info("no usable saved round; starting a new one")
            serial = max(saved.serial + 1 if saved is not None else 0, next_serial(self.stats))
            saved = new_round(
                self._pick_solution(mode, settings.language),
                hard_mode=settings.hard_mode,
                mode=mode,
                date_key=today if mode is GameMode.DAILY else None,
                serial=serial,
            )
        self.state = GameState(round=saved, settings=settings)
        self._persist(settings_changed=True)
        self._record_if_finished()
        if replay:
            self.notify(self.strings.daily_already_played)
        return self.state

    def new_round(self, mode: Optional[GameMode] = None, language: Optional[str] = None) -> GameState:
        """
        Start another round. Today's daily word is played once: while it is
        the current round it is kept, and once recorded it cannot restart.
        """
        mode = mode or self.state.round.mode
        language = language or self.state.settings.language
        if mode is GameMode.DAILY:
            rnd = self.state.round
            if rnd.mode is GameMode.DAILY and rnd.date_key == make_date_key(self.today()):
                return self.state
            if self._daily_done():
                return self.notify(self.strings.daily_already_played)
        return self.dispatch(ResetGame(
            solution=self._pick_solution(mode, language),
            mode=mode,
            date_key=make_date_key(self.today()) if mode is GameMode.DAILY else None,
            language=language,
        ))

    def set_language(self, language: str) -> GameState:
        """Switch language and start a practice round in it."""
        before = self.state.settings.language
        self.dispatch(SetLanguage(language))
        if self.state.settings.language != before:
            self.new_round(mode=GameMode.PRACTICE)
        return self.state

    # ---- dispatch ----

    def dispatch(self, action) -> GameState:
        if self.state is None:
            raise RuntimeError("Session.start() must be called before dispatch")
        prev = self.state
        self.state = reduce(prev, action, self.ctx)
        if self.state is prev:
            return self.state

        # A repeated rejection re-arms the timer even if the text is unchanged.
        if self.state.round.message != prev.round.message or isinstance(action, (SubmitGuess, SetMessage)):
            self._arm_message(self.state.round.message)
        self._persist(settings_changed=self.state.settings != prev.settings)
        self._record_if_finished()
        return self.state

    def press(self, key: str) -> GameState:
        """Map one key press (letter, Enter, Backspace) to an action."""
        k = key.strip().upper()
        if k in ENTER_KEYS:
            return self.dispatch(SubmitGuess())
        if k in BACKSPACE_KEYS:
            return self.dispatch(RemoveLetter())
        return self.dispatch(AddLetter(key))

    def type_word(self, text: str) -> GameState:
        """Replace the current input with `text` and submit it."""
        while self.state.round.current_input and not self.state.round.is_over:
            self.dispatch(RemoveLetter())
        for ch in text:
            self.dispatch(AddLetter(ch))
        return self.dispatch(SubmitGuess())

    # ---- messages ----

    def _arm_message(self, message: Optional[str]) -> None:
        self.message_deadline = None if message is None else self.clock() + self.config.message_ttl

    def tick(self) -> GameState:
        """Clear the transient message once its lifetime has passed."""
        if self.message_deadline is not None and self.clock() >= self.message_deadline:
            self.message_deadline = None
            return self.dispatch(SetMessage(None))
        return self.state

    def notify(self, message: str) -> GameState:
        return self.dispatch(SetMessage(message))

    # ---- sharing ----

    @property
    def strings(self) -> Strings:
        return get_strings(self.state.settings.language)

    def share_text(self) -> str:
        rnd = self.state.round
        return build_share_text(
            mode=rnd.mode,
            date_key=rnd.date_key,
            status=rnd.status,
            evaluations=rnd.evaluations,
            strings=self.strings,
            max_attempts=self.config.attempt_cap(rnd.hard_mode),
            color_blind=self.state.settings.color_blind_mode,
        )

    def share(self) -> Optional[str]:
        """
        Copy the share text to the clipboard. Failures only produce a
        transient message; the round is never affected.
        """
        if not self.state.round.is_over:
            self.notify(self.strings.nothing_to_share)
            return None
        text = self.share_text()
        if self.clipboard is None:
            self.notify(self.strings.clipboard_unavailable)
            return text
        try:
            self.clipboard(text)
        except Exception as e:
            logger.warning("clipboard write failed: %s", e)
            self.notify(self.strings.clipboard_unavailable)
            return text
        self.notify(self.strings.copied_to_clipboard)
        return text

    # ---- derived views ----

    @property
    def keyboard(self) -> Dict[str, LetterState]:
        return aggregate(self.state.round.evaluations)

    # ---- internals ----

    def _daily_done(self) -> bool:
        return is_recorded(self.stats, daily_identity(make_date_key(self.today())))

    def _pick_solution(self, mode: GameMode, language: str) -> str:
        if mode is GameMode.DAILY:
            return self.provider.daily_word(language, self.today())
        return self.provider.random_word(language)

    def _persist(self, *, settings_changed: bool) -> None:
        self.store.save(GAME_STATE_KEY, self.state.round.to_dict())
        if settings_changed:
            self.store.save(SETTINGS_KEY, self.state.settings.to_dict())

    def _record_if_finished(self) -> None:
        rnd = self.state.round
        if not rnd.is_over:
            return
        updated = record_result(self.stats, round_id_for(rnd), rnd.status, rnd.attempt_index)
        if updated is not self.stats:
            self.stats = updated
            self.store.save(STATS_KEY, self.stats.to_dict())
            logger.info("recorded %s round in %d attempt(s)", rnd.status.value, rnd.attempt_index)
