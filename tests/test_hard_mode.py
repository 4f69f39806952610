from wordmint.engine import evaluate, find_violation, filter_candidates
from wordmint.engine.constraints import COUNT, POSITION, derive_constraints
from wordmint.i18n import get_strings

EN = get_strings("en")


def test_no_history_no_violation():
    assert find_violation("ZZZZZ", []) is None


def test_revealed_position_must_be_kept():
    history = [evaluate("ALONE", "ALERT")]
    v = find_violation("BLEAT", history)
    assert v.kind == POSITION and v.position == 0 and v.letter == "A"
    assert v.message(EN) == "Hard mode: position 1 must be A"


def test_missing_repeated_letter_reports_count_not_position():
    # LEAVE vs LEVEL: L and E green, V and second E yellow -> needs two Es
    history = [evaluate("LEAVE", "LEVEL")]
    v = find_violation("LEMON", history)
    assert v.kind == COUNT and v.letter == "E" and v.count == 2
    assert v.message(EN) == "Hard mode: include at least 2 'E's"
    assert find_violation("LEVER", history) is None


def test_required_counts_take_max_not_sum():
    history = [evaluate("EARTH", "LEVEL"), evaluate("OCEAN", "LEVEL")]
    _, counts = derive_constraints(history)
    assert counts["E"] == 1
    assert find_violation("BEGIN", history) is None


def test_later_guess_does_not_erase_green():
    history = [evaluate("ALONE", "ALERT"), evaluate("BASIC", "ALERT")]
    positions, _ = derive_constraints(history)
    assert positions[0] == "A"


def test_lowest_position_reported_first():
    history = [evaluate("ZZZNZ", "CRANE"), evaluate("ZRZZZ", "CRANE")]
    v = find_violation("QQQQQ", history)
    assert v.position == 1 and v.letter == "R"


def test_short_candidate_is_padded():
    history = [evaluate("CRANE", "CRATE")]
    v = find_violation("CRA", history)
    assert v.kind == POSITION and v.position == 4


def test_portuguese_messages():
    pt = get_strings("pt")
    history = [evaluate("LEAVE", "LEVEL")]
    assert find_violation("LEMON", history).message(pt) == \
        "Modo difícil: inclua pelo menos 2 letras 'E'"


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [evaluate("RAISE", "CRANE")]
    cand = filter_candidates(words, history)
    assert "CRANE" in cand and "STARE" not in cand and "SCOOP" not in cand


def test_consistent_candidates_satisfy_hard_mode():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "brace", "grace"]
    history = [evaluate("TRACE", "GRACE")]
    for w in filter_candidates(words, history):
        assert find_violation(w, history) is None
