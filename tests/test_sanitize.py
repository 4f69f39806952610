import math

import pytest
from wordmint.engine import GameConfig, GameMode, LetterState, RoundStatus, evaluate
from wordmint.game import RoundState, SessionStats, Settings
from wordmint.storage import sanitize_round, sanitize_settings, sanitize_stats

MISSES = ["TRACE", "SLATE", "ALERT", "ALONE", "STARE", "RAISE", "LEVER", "GRACE"]


def snapshot(guesses, solution="CRANE", **extra):
    raw = {
        "solution": solution,
        "guesses": list(guesses),
        "evaluations": [evaluate(g, solution).to_dict() for g in guesses],
        "current_input": "",
        "status": "playing",
        "attempt_index": len(guesses),
        "hard_mode": False,
    }
    raw.update(extra)
    return raw


@pytest.mark.parametrize("raw", [{}, None, "junk", [1, 2], 42])
def test_empty_or_wrong_blob_gives_defaults(raw):
    assert sanitize_settings(raw) == Settings()
    assert sanitize_stats(raw) == SessionStats()
    assert sanitize_round(raw) is None


def test_settings_fields():
    s = sanitize_settings({"color_blind_mode": True, "hard_mode": "yes",
                           "theme": "blue", "language": "en", "extra": 1})
    assert s == Settings(color_blind_mode=True, hard_mode=False, theme="dark", language="en")
    assert sanitize_settings({"language": "fr", "theme": "light"}).language == "pt"


@pytest.mark.parametrize("raw,expected", [
    ([1, 2], (1, 2, 0, 0, 0, 0)),
    ([1, 2, 3, 4, 5, 6, 7, 8], (1, 2, 3, 4, 5, 6)),
    ([-3, 2.7, "x", True, None, float("nan")], (0, 2, 0, 0, 0, 0)),
    ("nope", (0, 0, 0, 0, 0, 0)),
])
def test_guess_distribution_normalized(raw, expected):
    assert sanitize_stats({"guess_distribution": raw}).guess_distribution == expected


def test_stats_counters_clamped():
    s = sanitize_stats({"games_played": -5, "games_won": math.inf, "current_streak": "7",
                        "max_streak": 4.9, "recorded_rounds": 12})
    assert (s.games_played, s.games_won, s.current_streak, s.max_streak) == (0, 0, 0, 4)
    assert s.recorded_rounds == ()


def test_stats_invariants_repaired():
    s = sanitize_stats({"games_played": 1, "games_won": 5, "current_streak": 9, "max_streak": 2})
    assert s.games_won == 1
    assert (s.current_streak, s.max_streak) == (9, 9)


def test_recorded_rounds_cleaned():
    s = sanitize_stats({"recorded_rounds": ["daily:2026-10-19", 3, "", None,
                                            "practice:0:CRANE:2", "daily:2026-10-19"]})
    assert s.recorded_rounds == ("daily:2026-10-19", "practice:0:CRANE:2")


@pytest.mark.parametrize("solution", ["CR4NE", "CRANES", "", None, 5])
def test_bad_solution_drops_round(solution):
    assert sanitize_round(snapshot(["TRACE"], solution="CRANE") | {"solution": solution}) is None


def test_bad_guess_drops_round():
    raw = snapshot(["TRACE"])
    raw["guesses"].append("TOOLONG")
    assert sanitize_round(raw) is None


def test_round_kept_and_normalized():
    raw = snapshot(["TRACE"], solution="crane", current_input="sl", attempt_index=9)
    rnd = sanitize_round(raw)
    assert isinstance(rnd, RoundState)
    assert rnd.solution == "CRANE"
    assert rnd.current_input == "SL"
    assert rnd.attempt_index == 1 == len(rnd.guesses) == len(rnd.evaluations)


def test_history_truncated_to_cap():
    rnd = sanitize_round(snapshot(MISSES, status="lost"))
    assert len(rnd.guesses) == len(rnd.evaluations) == rnd.attempt_index == 6
    assert rnd.status is RoundStatus.LOST

    hard = sanitize_round(snapshot(MISSES, hard_mode=True),
                          GameConfig(hard_mode_max_attempts=4))
    assert hard.attempt_index == 4 and hard.status is RoundStatus.LOST


def test_evaluations_rebuilt_from_guesses():
    # a malformed evaluation in the middle must not shift the later ones
    raw = snapshot(["TRACE", "SLATE", "ALERT"])
    raw["evaluations"][0] = {"letters": ["T"], "states": ["absent"]}
    rnd = sanitize_round(raw)
    assert rnd.guesses == ("TRACE", "SLATE", "ALERT")
    assert [ev.word for ev in rnd.evaluations] == list(rnd.guesses)
    assert rnd.evaluations[1] == evaluate("SLATE", "CRANE")


def test_evaluation_for_another_word_is_replaced():
    raw = snapshot(["TRACE"])
    raw["evaluations"] = [evaluate("SLATE", "CRANE").to_dict()]
    raw["evaluations"][0]["states"][0] = "purple"
    rnd = sanitize_round(raw)
    assert rnd.evaluations == (evaluate("TRACE", "CRANE"),)
    assert rnd.evaluations[0].states[0] is LetterState.ABSENT


def test_missing_evaluations_rebuilt():
    raw = snapshot(["TRACE", "SLATE"])
    del raw["evaluations"]
    rnd = sanitize_round(raw)
    assert len(rnd.evaluations) == rnd.attempt_index == 2


def test_status_and_mode_fallbacks():
    rnd = sanitize_round(snapshot([], status="paused", mode="weekly", current_input="ab"))
    assert rnd.status is RoundStatus.PLAYING and rnd.mode is GameMode.PRACTICE
    assert rnd.current_input == "AB"

    # daily without a usable date key degrades to practice
    assert sanitize_round(snapshot([], mode="daily", date_key="yesterday")).mode is GameMode.PRACTICE
    daily = sanitize_round(snapshot([], mode="daily", date_key="2026-10-19"))
    assert daily.mode is GameMode.DAILY and daily.date_key == "2026-10-19"


def test_finished_round_drops_current_input():
    rnd = sanitize_round(snapshot(["CRANE"], status="won", current_input="AB"))
    assert rnd.status is RoundStatus.WON and rnd.current_input == ""


@pytest.mark.parametrize("guesses,status", [
    ([], "won"),
    (["TRACE"], "won"),
    (["TRACE"], "lost"),
    (["TRACE", "SLATE"], "lost"),
])
def test_impossible_stored_status_is_rederived(guesses, status):
    rnd = sanitize_round(snapshot(guesses, status=status))
    assert rnd.status is RoundStatus.PLAYING
    assert rnd.attempt_index == len(guesses)


def test_status_follows_guesses():
    assert sanitize_round(snapshot(["TRACE", "CRANE"])).status is RoundStatus.WON
    assert sanitize_round(snapshot(MISSES[:6], status="playing")).status is RoundStatus.LOST


def test_guesses_after_the_win_are_dropped():
    rnd = sanitize_round(snapshot(["TRACE", "CRANE", "SLATE"], status="playing"))
    assert rnd.guesses == ("TRACE", "CRANE")
    assert rnd.status is RoundStatus.WON


@pytest.mark.parametrize("word", ["CR-ANE", "CRA NE", " CRANE", "C.R.A.N.E"])
def test_stored_word_with_extra_characters_drops_round(word):
    assert sanitize_round(snapshot([], solution="CRANE") | {"solution": word}) is None
    assert sanitize_round(snapshot(["TRACE"]) | {"guesses": ["TRACE", word]}) is None


def test_accented_stored_word_is_folded():
    rnd = sanitize_round(snapshot([], solution="CRANE") | {"solution": "Águia"})
    assert rnd.solution == "AGUIA"


def test_snapshot_restores_round():
    rnd = RoundState(solution="CRANE", guesses=("TRACE",),
                     evaluations=(evaluate("TRACE", "CRANE"),), current_input="CR",
                     attempt_index=1, serial=3)
    assert sanitize_round(rnd.to_dict()) == rnd
