import pytest
from wordguess.engine import (LetterStatus, RejectionReason, filter_candidates, score,
                              score_statuses, to_pattern, validate_guess)

# --- golden tests (per-position rule, no multiplicity bookkeeping) ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("crane", "crane", "GGGGG"),
    ("slate", "crane", "--G-G"),
    ("lemon", "apple", "YY---"),
    ("pygmy", "crane", "-----"),
    ("eerie", "crane", "YYY-G"),
    ("apple", "paper", "YYG-Y"),
    ("SLATE", "Crane", "--G-G"),
])
def test_score_golden(guess, secret, expected):
    assert score(guess, secret) == expected

def test_score_statuses_and_pattern():
    statuses = score_statuses("brine", "crane")
    assert statuses == [LetterStatus.WRONG, LetterStatus.CORRECT, LetterStatus.WRONG,
                        LetterStatus.CORRECT, LetterStatus.CORRECT]
    assert to_pattern(statuses) == "-G-GG"

def test_letter_status_order_and_symbols():
    assert LetterStatus.WRONG < LetterStatus.WRONG_POSITION < LetterStatus.CORRECT
    assert LetterStatus.from_symbol("Y") is LetterStatus.WRONG_POSITION
    with pytest.raises(ValueError):
        LetterStatus.from_symbol("x")

def test_rejection_messages():
    assert RejectionReason.WORD_TOO_LONG.message == "Only 5 letter words are accepted"
    assert RejectionReason.WORD_DOES_NOT_EXIST.message == "This word does not exist!"
    assert str(RejectionReason.GAME_OVER) == "Game over!"

def test_filter_candidates_history():
    words = ["crane", "brine", "apple", "slate", "pygmy", "cranes", "cr4ne"]
    cand = filter_candidates(words, [("slate", "--G-G")])
    assert cand == ["crane"]

def test_filter_candidates_keeps_all_without_history():
    assert filter_candidates(["Crane", " slate "], []) == ["crane", "slate"]

def test_validate_guess_order():
    dictionary = {"crane", "slate"}
    assert validate_guess("crane", dictionary) is None
    assert validate_guess("cranes", dictionary) is RejectionReason.WORD_TOO_LONG
    assert validate_guess("zzzzz", dictionary) is RejectionReason.WORD_DOES_NOT_EXIST
    # closed round: GAME_OVER beats membership, but length still comes first
    assert validate_guess("zzzzz", dictionary, round_open=False) is RejectionReason.GAME_OVER
    assert validate_guess("zz", dictionary, round_open=False) is RejectionReason.WORD_TOO_LONG
