"""
JSON file store for the three persisted blobs.

Keys map to `wordmint-<key>.json` inside one directory. Writes replace the
whole file (temp file + os.replace); reads return None for anything missing
or unreadable so the sanitizers can fall back to defaults.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"
STATS_KEY = "stats"
GAME_STATE_KEY = "game-state"
KEYS = (SETTINGS_KEY, STATS_KEY, GAME_STATE_KEY)

DEFAULT_STATE_DIR = Path.home() / ".wordmint"


class JsonStore:
    def __init__(self, directory: Path | str = DEFAULT_STATE_DIR):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        if key not in KEYS:
            raise ValueError(f"Unknown storage key: {key}. Available: {list(KEYS)}")
        return self.directory / f"wordmint-{key}.json"

    def load(self, key: str) -> Optional[Any]:
        p = self.path_for(key)
        if not p.exists():
            return None
        try:
            with p.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("ignoring unreadable %s (%s): %s", key, p, e)
            return None

    def save(self, key: str, value: Any) -> str:
        p = self.path_for(key)
        p.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=p.name, suffix=".tmp", dir=str(p.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, indent=2, ensure_ascii=False)
            os.replace(tmp, p)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
        logger.debug("saved %s -> %s", key, p)
        return str(p)


class MemoryStore:
    """Dict-backed store with the JsonStore interface (tests, simulations)."""

    def __init__(self, initial: Optional[dict] = None):
        self.data = dict(initial or {})

    def load(self, key: str) -> Optional[Any]:
        return self.data.get(key)

    def save(self, key: str, value: Any) -> str:
        self.data[key] = json.loads(json.dumps(value))
        return key
