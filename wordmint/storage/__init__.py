from .sanitize import (
    sanitize_settings, sanitize_stats, sanitize_round, sanitize_distribution, sanitize_recorded_rounds,
)
from .store import JsonStore, MemoryStore, SETTINGS_KEY, STATS_KEY, GAME_STATE_KEY

__all__ = [
    "sanitize_settings", "sanitize_stats", "sanitize_round", "sanitize_distribution",
    "sanitize_recorded_rounds",
    "JsonStore", "MemoryStore", "SETTINGS_KEY", "STATS_KEY", "GAME_STATE_KEY",
]
