from wordmint.engine import GameMode, RoundStatus, evaluate
from wordmint.game import build_share_text
from wordmint.i18n import get_strings

EN = get_strings("en")


def test_won_grid():
    evs = [evaluate("TRACE", "CRANE"), evaluate("CRANE", "CRANE")]
    text = build_share_text(mode=GameMode.PRACTICE, date_key=None, status=RoundStatus.WON,
                            evaluations=evs, strings=EN)
    assert text.splitlines() == ["WordMint Random 2/6", "⬛🟩🟩🟨🟩", "🟩🟩🟩🟩🟩"]


def test_lost_and_playing_headers():
    evs = [evaluate("SLATE", "CRANE")]
    lost = build_share_text(mode=GameMode.PRACTICE, date_key=None, status=RoundStatus.LOST,
                            evaluations=evs, strings=EN)
    assert lost.splitlines()[0] == "WordMint Random X/6"
    playing = build_share_text(mode=GameMode.PRACTICE, date_key=None,
                               status=RoundStatus.PLAYING, evaluations=[], strings=EN,
                               max_attempts=4)
    assert playing == "WordMint Random -/4"


def test_daily_color_blind_portuguese():
    text = build_share_text(mode=GameMode.DAILY, date_key="2026-10-19", status=RoundStatus.WON,
                            evaluations=[evaluate("TRACE", "CRANE")], strings=get_strings("pt"),
                            color_blind=True)
    assert text.splitlines() == ["WordMint Diário 2026-10-19 1/6", "⬛🟧🟧🟦🟧"]
