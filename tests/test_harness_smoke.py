from wordmint.datasets import StaticWordProvider
from wordmint.game import ToggleHardMode
from wordmint.game.session import Session
from wordmint.harness import run_batch, run_case, summarize, write_csv

ANSWERS = ["crane", "raise", "stare", "trace", "cared"]


def _session():
    session = Session(StaticWordProvider(ANSWERS, seed=42))
    session.start()
    return session


def test_run_case_smoke():
    import random
    r = run_case(_session(), "CRANE", rng=random.Random(42))
    assert "success" in r and "history" in r
    # five candidates: a consistent guesser can't need more than five tries
    assert r["success"] is True
    assert r["history"][-1] == ("CRANE", "GGGGG")


def test_run_batch_hard_mode_updates_stats(tmp_path):
    session = _session()
    session.dispatch(ToggleHardMode())
    results = run_batch(session, ANSWERS, seed=7)
    assert all(r["success"] and r["hard_mode"] for r in results)
    assert session.stats.games_played == len(ANSWERS)
    assert session.stats.games_won == len(ANSWERS)

    summary = summarize(results, 6)
    assert summary["rounds"] == 5 and summary["win_rate"] == 1.0
    assert sum(summary["distribution"]) == 5

    out = write_csv(results, str(tmp_path / "sim.csv"), max_attempts=6)
    header = (tmp_path / "sim.csv").read_text(encoding="utf-8").splitlines()[0]
    assert out.endswith("sim.csv") and header.startswith("answer,success,guesses")


def test_summarize_empty():
    assert summarize([], 6)["rounds"] == 0
