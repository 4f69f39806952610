"""
Cumulative session statistics.

`record_result` runs once a round is finished. It is idempotent per round
identity: recorded identities are kept on the stats (every daily key, plus
the most recent practice rounds), and recording a known one returns the
stats unchanged.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Tuple

from wordmint.engine.types import GameMode, RoundStatus

from .state import RoundState, SessionStats

DAILY_PREFIX = "daily:"
PRACTICE_PREFIX = "practice:"
RECENT_PRACTICE_KEPT = 100


def round_identity(solution: str, guess_count: int, serial: int = 0) -> str:
    """Practice-round identity: solution plus number of guesses (and reset serial)."""
    return f"{PRACTICE_PREFIX}{serial}:{solution}:{guess_count}"


def daily_identity(date_key: str) -> str:
    return f"{DAILY_PREFIX}{date_key}"


def round_id_for(rnd: RoundState) -> str:
    if rnd.mode is GameMode.DAILY and rnd.date_key:
        return daily_identity(rnd.date_key)
    return round_identity(rnd.solution, len(rnd.guesses), rnd.serial)


def is_recorded(stats: SessionStats, round_id: str) -> bool:
    return round_id in stats.recorded_rounds


def remember_round(recorded: Tuple[str, ...], round_id: str,
                   keep: int = RECENT_PRACTICE_KEPT) -> Tuple[str, ...]:
    """Append `round_id`; daily keys are kept forever, practice ids only the last `keep`."""
    ids = [r for r in recorded if r != round_id] + [round_id]
    practice = [r for r in ids if not r.startswith(DAILY_PREFIX)]
    dropped = set(practice[:max(0, len(practice) - keep)])
    return tuple(r for r in ids if r not in dropped)


def next_serial(stats: SessionStats) -> int:
    """First reset serial above every practice round already recorded."""
    serials = [-1]
    for r in stats.recorded_rounds:
        if r.startswith(PRACTICE_PREFIX):
            head = r[len(PRACTICE_PREFIX):].split(":", 1)[0]
            if head.isdigit():
                serials.append(int(head))
    return max(serials) + 1


def record_result(stats: SessionStats, round_id: str, status: RoundStatus,
                  attempts_used: int) -> SessionStats:
    """
    Fold one finished round into `stats`.

    Won : played+1, won+1, distribution[attempts_used-1]+1, streak+1, max_streak updated
    Lost: played+1, streak reset to 0
    Playing rounds and already-recorded identities leave `stats` untouched.
    """
    if status is RoundStatus.PLAYING or is_recorded(stats, round_id):
        return stats

    recorded = remember_round(stats.recorded_rounds, round_id)

    if status is RoundStatus.WON:
        dist = list(stats.guess_distribution)
        if 1 <= attempts_used <= len(dist):
            dist[attempts_used - 1] += 1
        streak = stats.current_streak + 1
        return replace(
            stats,
            games_played=stats.games_played + 1,
            games_won=stats.games_won + 1,
            current_streak=streak,
            max_streak=max(stats.max_streak, streak),
            guess_distribution=tuple(dist),
            recorded_rounds=recorded,
        )

    return replace(
        stats,
        games_played=stats.games_played + 1,
        current_streak=0,
        recorded_rounds=recorded,
    )


def win_rate(stats: SessionStats) -> float:
    return stats.games_won / stats.games_played if stats.games_played else 0.0
