"""
Self-play harness.

- run_case:  play one round with a known solution through a Session, using a
             consistent-random bot (any word that still fits every evaluation).
- run_batch: play many rounds in sequence with optional tqdm progress.
- summarize: numpy aggregates over a batch (win rate, mean guesses, histogram).

Rounds go through the same reducer, stats and persistence path a player
uses, so a batch doubles as an end-to-end exercise of the game.
"""

from __future__ import annotations

import random
import time
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from wordmint.engine.constraints import filter_candidates
from wordmint.engine.scoring import pattern
from wordmint.engine.types import GameMode, RoundStatus
from wordmint.game.actions import ResetGame
from wordmint.game.session import Session


def pick_guess(candidates: List[str], rng: random.Random) -> str:
    """Uniform pick among the words still consistent with the history."""
    return candidates[rng.randrange(len(candidates))]


def run_case(session: Session, solution: str, *, rng: random.Random) -> Dict:
    """
    Play one round to completion.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            hard_mode (bool), history (list[(guess, pattern)])
    """
    language = session.state.settings.language
    session.dispatch(ResetGame(solution=solution, mode=GameMode.PRACTICE, language=language))

    pool = session.provider.words(language)
    candidates = list(pool)

    t0 = time.perf_counter_ns()
    while not session.state.round.is_over:
        before = session.state.round.attempt_index
        guess = pick_guess(candidates or pool, rng)
        session.type_word(guess)
        rnd = session.state.round
        if rnd.attempt_index == before:
            raise RuntimeError(f"guess {guess!r} was rejected: {rnd.message}")
        # Narrow candidate set using the new feedback before next turn
        candidates = filter_candidates(candidates, rnd.evaluations[-1:])
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    rnd = session.state.round
    return {
        "answer": rnd.solution,
        "success": rnd.status is RoundStatus.WON,
        "guesses": rnd.attempt_index,
        "time_ms": dt,
        "hard_mode": rnd.hard_mode,
        "history": [(g, pattern(ev)) for g, ev in zip(rnd.guesses, rnd.evaluations)],
    }


def run_batch(
        session: Session,
        solutions: List[str],
        *,
        seed: int | None = None,
        sample: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many rounds back-to-back. With `sample`, a seeded random subset of
    `solutions` is played instead of all of them.
    """
    rng = random.Random(seed)
    cases = list(solutions)
    if sample is not None and sample < len(cases):
        rng.shuffle(cases)
        cases = cases[:sample]

    iterator = tqdm(cases, ncols=80, desc="Playing", unit="round") if progress else cases
    return [run_case(session, ans, rng=rng) for ans in iterator]


def summarize(results: List[Dict], max_attempts: int) -> Dict:
    """Aggregate a batch; plain floats/ints so it can go into a JSON manifest."""
    if not results:
        return {"rounds": 0, "win_rate": 0.0, "mean_guesses": 0.0,
                "distribution": [0] * max_attempts, "p90_time_ms": 0.0}

    success = np.array([r["success"] for r in results], dtype=bool)
    guesses = np.array([r["guesses"] for r in results], dtype=int)
    times = np.array([r["time_ms"] for r in results], dtype=float)

    won = guesses[success]
    dist = np.bincount(won - 1, minlength=max_attempts)[:max_attempts] if won.size else \
        np.zeros(max_attempts, dtype=int)

    return {
        "rounds": int(len(results)),
        "win_rate": float(success.mean()),
        "mean_guesses": float(won.mean()) if won.size else 0.0,
        "distribution": [int(x) for x in dist],
        "p90_time_ms": float(np.percentile(times, 90)),
    }
