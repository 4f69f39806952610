import datetime as dt
import json

import pytest
from wordmint.datasets import StaticWordProvider
from wordmint.engine import GameMode, RoundStatus
from wordmint.game import ToggleHardMode
from wordmint.game.session import Session
from wordmint.storage import GAME_STATE_KEY, SETTINGS_KEY, STATS_KEY, JsonStore, MemoryStore

WORDS = ["crane", "trace", "slate", "alert", "alone", "stare", "raise"]


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def make_session(store=None, *, clipboard=None, clock=None, today=None):
    store = store if store is not None else MemoryStore({SETTINGS_KEY: {"language": "en"}})
    return Session(
        StaticWordProvider(["crane"] + WORDS[1:], seed=1),
        store,
        clock=clock or FakeClock(),
        today=today or (lambda: dt.date(2026, 10, 19)),
        clipboard=clipboard,
    )


def test_start_fresh_and_persist():
    store = MemoryStore()
    session = make_session(store)
    state = session.start()
    assert state.round.status is RoundStatus.PLAYING
    assert state.settings.language == "pt"
    assert store.data[GAME_STATE_KEY]["solution"] == state.round.solution
    assert store.data[SETTINGS_KEY]["language"] == "pt"


def test_corrupt_store_falls_back_to_defaults():
    store = MemoryStore({
        SETTINGS_KEY: ["not", "a", "dict"],
        STATS_KEY: {"games_played": -1, "guess_distribution": [9]},
        GAME_STATE_KEY: {"solution": "X1"},
    })
    session = make_session(store)
    session.start()
    assert session.stats.games_played == 0
    assert session.stats.guess_distribution == (9, 0, 0, 0, 0, 0)
    assert len(session.state.round.solution) == 5


def test_win_records_once_and_survives_restart():
    store = MemoryStore({SETTINGS_KEY: {"language": "en"}})
    session = make_session(store)
    session.start()
    solution = session.state.round.solution
    session.type_word(solution)
    assert session.state.round.status is RoundStatus.WON
    assert session.stats.games_won == 1
    assert store.data[STATS_KEY]["guess_distribution"][0] == 1

    # a new session over the same storage restores the finished round
    again = make_session(store)
    again.start()
    assert again.state.round.status is RoundStatus.WON
    assert again.stats.games_played == 1


def test_loss_then_new_round():
    session = make_session()
    session.start()
    misses = [w for w in WORDS if w.upper() != session.state.round.solution]
    for w in misses[:6]:
        session.type_word(w)
    assert session.state.round.status is RoundStatus.LOST
    assert session.stats.current_streak == 0 and session.stats.games_played == 1

    session.new_round()
    assert session.state.round.status is RoundStatus.PLAYING
    assert session.state.round.attempt_index == 0


def test_press_keys():
    session = make_session()
    session.start()
    for k in ["c", "r", "x", "Backspace", "a"]:
        session.press(k)
    assert session.state.round.current_input == "CRA"
    session.press("Enter")
    assert session.state.round.message == "Not enough letters"


def test_message_expires_after_ttl():
    clock = FakeClock()
    session = make_session(clock=clock)
    session.start()
    session.type_word("cr")
    assert session.state.round.message == "Not enough letters"
    clock.now += 1.0
    assert session.tick().round.message == "Not enough letters"
    clock.now += 1.5
    assert session.tick().round.message is None


def test_share_copies_to_clipboard():
    copied = []
    session = make_session(clipboard=copied.append)
    session.start()
    assert session.share() is None
    assert session.state.round.message == "Finish the round to share it"

    session.type_word(session.state.round.solution)
    text = session.share()
    assert copied == [text]
    assert text.startswith("WordMint Random 1/6")
    assert session.state.round.message == "Copied to clipboard"


def test_share_clipboard_failure_is_not_fatal():
    def broken(text):
        raise RuntimeError("denied")

    session = make_session(clipboard=broken)
    session.start()
    session.type_word(session.state.round.solution)
    before = session.state.round
    text = session.share()
    assert text is not None
    assert session.state.round.message == "Clipboard unavailable"
    assert session.state.round.guesses == before.guesses
    assert session.state.round.status is RoundStatus.WON


def test_daily_round_replaced_when_stale():
    store = MemoryStore({SETTINGS_KEY: {"language": "en"}})
    day = [dt.date(2026, 10, 19)]
    session = make_session(store, today=lambda: day[0])
    session.start(GameMode.DAILY)
    assert session.state.round.date_key == "2026-10-19"
    session.type_word(session.state.round.solution)
    assert "daily:2026-10-19" in session.stats.recorded_rounds

    day[0] = dt.date(2026, 10, 20)
    later = make_session(store, today=lambda: day[0])
    later.start(GameMode.DAILY)
    assert later.state.round.date_key == "2026-10-20"
    assert later.state.round.status is RoundStatus.PLAYING


def test_toggle_hard_mode_persists_settings():
    store = MemoryStore()
    session = make_session(store)
    session.start()
    session.dispatch(ToggleHardMode())
    assert store.data[SETTINGS_KEY]["hard_mode"] is True
    assert store.data[GAME_STATE_KEY]["hard_mode"] is True


def test_set_language_starts_new_round():
    session = make_session()
    session.start()
    serial = session.state.round.serial
    session.set_language("pt")
    assert session.state.settings.language == "pt"
    assert session.state.round.serial == serial + 1


def test_json_store_roundtrip_and_corruption(tmp_path):
    store = JsonStore(tmp_path)
    store.save(STATS_KEY, {"games_played": 3})
    assert store.load(STATS_KEY) == {"games_played": 3}
    assert store.load(SETTINGS_KEY) is None

    (tmp_path / "wordmint-settings.json").write_text("{not json", encoding="utf-8")
    assert store.load(SETTINGS_KEY) is None
    with pytest.raises(ValueError):
        store.path_for("other")


def test_session_over_json_store(tmp_path):
    (tmp_path / "wordmint-settings.json").write_text(json.dumps({"language": "en"}),
                                                     encoding="utf-8")
    session = make_session(JsonStore(tmp_path))
    session.start()
    session.type_word("cr")
    saved = json.loads((tmp_path / "wordmint-game-state.json").read_text(encoding="utf-8"))
    assert saved["current_input"] == "CR"
    assert "message" not in saved


def test_daily_word_played_once_per_day():
    session = make_session()
    session.start(GameMode.DAILY)
    session.type_word(session.state.round.solution)
    assert session.stats.games_played == 1

    session.new_round(mode=GameMode.PRACTICE)
    session.type_word(session.state.round.solution)
    assert session.stats.games_played == 2

    practice = session.state.round
    session.new_round(mode=GameMode.DAILY)
    assert session.state.round.mode is GameMode.PRACTICE
    assert session.state.round.guesses == practice.guesses
    assert session.state.round.message == "You already played today's word"
    assert (session.stats.games_played, session.stats.games_won) == (2, 2)


def test_daily_in_progress_is_not_restarted():
    session = make_session()
    session.start(GameMode.DAILY)
    session.type_word("trace" if session.state.round.solution != "TRACE" else "slate")
    session.new_round(mode=GameMode.DAILY)
    assert session.state.round.attempt_index == 1


def test_start_daily_after_finishing_it_plays_practice():
    store = MemoryStore({SETTINGS_KEY: {"language": "en"}})
    session = make_session(store)
    session.start(GameMode.DAILY)
    session.type_word(session.state.round.solution)
    session.new_round(mode=GameMode.PRACTICE)

    again = make_session(store)
    again.start(GameMode.DAILY)
    assert again.state.round.mode is GameMode.PRACTICE
    assert again.stats.games_played == 1


def test_impossible_saved_win_is_not_recorded():
    store = MemoryStore({
        SETTINGS_KEY: {"language": "en"},
        GAME_STATE_KEY: {"solution": "CRANE", "guesses": [], "status": "won"},
    })
    session = make_session(store)
    session.start()
    assert session.state.round.status is RoundStatus.PLAYING
    assert session.stats.games_played == 0 and session.stats.games_won == 0


def test_fresh_round_serial_follows_recorded_rounds():
    store = MemoryStore({
        SETTINGS_KEY: {"language": "en"},
        STATS_KEY: {"games_played": 1, "recorded_rounds": ["practice:7:CRANE:1"]},
    })
    session = make_session(store)
    session.start()
    assert session.state.round.serial == 8
