# apps/cli/simulate.py
"""
Self-play runner for WordMint.

This script:
  1) Validates the word list for the chosen language (count + SHA).
  2) Plays a batch of rounds through a Session with a consistent-random bot.
  3) Writes:
       - CSV:  per-round results + guess/pattern history columns
       - JSON: manifest with config, word-list report, stats and summary
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wordmint.datasets import FileWordProvider, pretty_summary, validate_wordlist
from wordmint.engine.constants import LANGUAGES, GameConfig
from wordmint.engine.types import GameMode
from wordmint.game.actions import SetLanguage, ToggleHardMode
from wordmint.game.session import Session
from wordmint.harness import run_batch, summarize, write_csv, write_manifest
from wordmint.harness.io import git_commit_or_unknown, timestamp_id
from wordmint.storage.store import JsonStore, MemoryStore

logger = logging.getLogger("wordmint.simulate")


def main():
    ap = argparse.ArgumentParser(description="WordMint: self-play simulation")
    ap.add_argument("--lang", choices=LANGUAGES, default="en", help="word list language")
    ap.add_argument("--hard", action="store_true", help="play every round in hard mode")
    ap.add_argument("--max-attempts", type=int, default=6, help="attempt cap per round")
    ap.add_argument("--sample", type=int, help="play only a seeded subset of the words")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--state-dir", help="persist session state here (default: in memory)")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar" if sys.stderr.isatty() else "off")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    provider = FileWordProvider(seed=args.seed)

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.lang, provider.path_for(args.lang))
    print(pretty_summary(rep))
    if not rep["passed"]:
        logger.warning("word list issues: %s", "; ".join(rep["issues"]))

    # 2) Session wired to memory or disk
    config = GameConfig(max_attempts=args.max_attempts)
    store = JsonStore(Path(args.state_dir)) if args.state_dir else MemoryStore()
    session = Session(provider, store, config=config)
    session.start(GameMode.PRACTICE)
    session.dispatch(SetLanguage(args.lang))
    if args.hard != session.state.settings.hard_mode:
        session.dispatch(ToggleHardMode())

    # 3) Play
    results = run_batch(
        session,
        provider.words(args.lang),
        seed=args.seed,
        sample=args.sample,
        progress=args.progress == "bar",
    )
    summary = summarize(results, config.attempt_cap(args.hard))

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_attempts=config.attempt_cap(args.hard))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "summary": summary,
        "stats": session.stats.to_dict(),
    }, str(manifest_path))

    print(
        f"rounds={summary['rounds']} win_rate={summary['win_rate']:.1%} "
        f"mean_guesses={summary['mean_guesses']:.2f} dist={summary['distribution']}"
    )
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
