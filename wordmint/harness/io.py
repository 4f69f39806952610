"""
Output files for self-play runs: one CSV row per round plus a JSON manifest.

Patterns in the CSV are stored as "GUESS:PATTERN" pairs separated by spaces,
e.g. "CRANE:-GGY- TRACE:GGGGG", so a row stays one cell wide per round no
matter how many attempts it took.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

CSV_FIELDS = ["answer", "success", "guesses", "score", "hard_mode", "time_ms", "history"]


def _history_cell(history) -> str:
    return " ".join(f"{g}:{p}" for g, p in history)


def write_csv(results: List[Dict], path: str, max_attempts: int) -> str:
    """Write round results to `path`; `score` reads like the share header (3/6, X/6)."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "score": f"{r['guesses'] if r['success'] else 'X'}/{max_attempts}",
                "hard_mode": r.get("hard_mode", False),
                "time_ms": round(float(r["time_ms"]), 3),
                "history": _history_cell(r.get("history", [])),
            })
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    # default=str covers Paths and enums coming from argparse/config values
    p.write_text(json.dumps(manifest, indent=2, ensure_ascii=False, default=str), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True, text=True, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip() or "unknown"
