# apps/cli/play.py
"""
Terminal front end for WordMint.

Type a word and press Enter to submit it. Commands start with ':'
  :new          start a new round
  :daily        switch to the daily word (:random to go back)
  :share        copy the result grid to the clipboard
  :hard :cb     toggle hard mode / color-blind palette
  :theme        toggle the light/dark theme
  :lang <code>  switch language (pt, en)
  :stats        show statistics
  :quit         leave

State (settings, stats, the current round) is kept as JSON files under
--state-dir and restored on the next start.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import subprocess
import sys
from pathlib import Path

from wordmint.datasets import FileWordProvider
from wordmint.engine.constants import LANGUAGES, WORD_LENGTH
from wordmint.engine.types import GameMode, LetterState
from wordmint.game.actions import ToggleColorBlind, ToggleHardMode, ToggleTheme
from wordmint.game.reducer import attempts_left
from wordmint.game.session import Session
from wordmint.game.stats import win_rate
from wordmint.storage.store import DEFAULT_STATE_DIR, JsonStore

logger = logging.getLogger("wordmint.cli")

KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")

# (background, foreground) per state; the second palette swaps green/yellow
# for orange/blue.
PALETTES = {
    False: {
        LetterState.CORRECT: "\033[42m\033[30m",
        LetterState.PRESENT: "\033[43m\033[30m",
        LetterState.ABSENT: "\033[100m\033[37m",
        LetterState.EMPTY: "\033[2m",
    },
    True: {
        LetterState.CORRECT: "\033[48;5;208m\033[30m",
        LetterState.PRESENT: "\033[44m\033[37m",
        LetterState.ABSENT: "\033[100m\033[37m",
        LetterState.EMPTY: "\033[2m",
    },
}
RESET = "\033[0m"

# Clipboard commands tried in order; the first one found on PATH wins.
CLIPBOARD_COMMANDS = (
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
)


def system_clipboard(text: str) -> None:
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]):
            subprocess.run(cmd, input=text.encode("utf-8"), check=True, timeout=5)
            return
    raise RuntimeError("no clipboard command available")


def _tile(letter: str, state: LetterState, color_blind: bool, plain: bool) -> str:
    if plain:
        mark = {LetterState.CORRECT: "[{}]", LetterState.PRESENT: "({})",
                LetterState.ABSENT: " {} ", LetterState.EMPTY: " {} "}[state]
        return mark.format(letter if letter.strip() else "_")
    return f"{PALETTES[color_blind][state]} {letter or ' '} {RESET}"


def render(session: Session, *, plain: bool) -> str:
    state = session.state
    rnd = state.round
    cb = state.settings.color_blind_mode
    lines = []
    for ev in rnd.evaluations:
        lines.append("".join(_tile(l, s, cb, plain) for l, s in ev))
    if not rnd.is_over:
        active = rnd.current_input.ljust(WORD_LENGTH, "_")
        lines.append("".join(_tile(ch, LetterState.EMPTY, cb, plain) for ch in active))

    hints = session.keyboard
    lines.append("")
    for row in KEYBOARD_ROWS:
        lines.append(" ".join(
            _tile(ch, hints.get(ch, LetterState.EMPTY), cb, plain) if ch in hints else ch
            for ch in row
        ))

    strings = session.strings
    flags = []
    if rnd.hard_mode:
        flags.append("hard")
    if rnd.mode is GameMode.DAILY:
        flags.append(f"daily {rnd.date_key}")
    status = {
        "playing": strings.status_playing,
        "won": strings.status_won,
        "lost": strings.status_lost,
    }[rnd.status.value]
    left = attempts_left(state, session.config)
    tail = f" | {strings.attempts_remaining(left)}" if left else ""
    lines.append("")
    lines.append(f"{status}{tail}" + (f" [{', '.join(flags)}]" if flags else ""))
    if rnd.message:
        lines.append(f"> {rnd.message}")
    return "\n".join(lines)


def render_stats(session: Session) -> str:
    s = session.stats
    top = max(s.guess_distribution) or 1
    lines = [
        f"games={s.games_played} win_rate={win_rate(s):.0%} "
        f"streak={s.current_streak} max_streak={s.max_streak}",
    ]
    for i, n in enumerate(s.guess_distribution, 1):
        lines.append(f"{i} {'#' * max(1, round(20 * n / top)) if n else ''} {n}")
    return "\n".join(lines)


def handle_command(session: Session, line: str) -> bool:
    """Run one ':' command. Returns False when the player wants to quit."""
    cmd, _, arg = line[1:].strip().partition(" ")
    cmd = cmd.lower()
    if cmd in ("q", "quit", "exit"):
        return False
    if cmd == "new":
        session.new_round()
    elif cmd == "daily":
        session.new_round(mode=GameMode.DAILY)
    elif cmd == "random":
        session.new_round(mode=GameMode.PRACTICE)
    elif cmd == "share":
        text = session.share()
        if text:
            print(text)
    elif cmd == "hard":
        session.dispatch(ToggleHardMode())
    elif cmd == "cb":
        session.dispatch(ToggleColorBlind())
    elif cmd == "theme":
        session.dispatch(ToggleTheme())
        print(f"theme: {session.state.settings.theme}")
    elif cmd == "lang":
        if arg not in LANGUAGES:
            print(f"languages: {', '.join(LANGUAGES)}")
        else:
            session.set_language(arg)
    elif cmd == "stats":
        print(render_stats(session))
    else:
        print(__doc__.split("\n\n")[1])
    return True


def main():
    ap = argparse.ArgumentParser(description="WordMint: guess the five-letter word")
    ap.add_argument("--lang", choices=LANGUAGES, help="word list language (default: saved setting)")
    ap.add_argument("--daily", action="store_true", help="play the word of the day")
    ap.add_argument("--hard", action="store_true", help="turn hard mode on")
    ap.add_argument("--state-dir", default=str(DEFAULT_STATE_DIR),
                    help="directory for settings/stats/round JSON files")
    ap.add_argument("--seed", type=int, help="RNG seed for random words")
    ap.add_argument("--plain", action="store_true", help="no ANSI colors")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    session = Session(
        FileWordProvider(seed=args.seed),
        JsonStore(Path(args.state_dir)),
        clipboard=system_clipboard,
    )
    session.start(GameMode.DAILY if args.daily else GameMode.PRACTICE)
    logger.info("state dir: %s", args.state_dir)
    if args.lang and args.lang != session.state.settings.language:
        session.set_language(args.lang)
        if args.daily:
            session.new_round(mode=GameMode.DAILY)
    if args.hard and not session.state.settings.hard_mode:
        session.dispatch(ToggleHardMode())

    plain = args.plain or not sys.stdout.isatty()
    print(render(session, plain=plain))
    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        session.tick()
        if line.startswith(":"):
            if not handle_command(session, line):
                break
        elif line:
            session.type_word(line)
        print(render(session, plain=plain))


if __name__ == "__main__":
    main()
