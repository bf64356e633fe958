import itertools
from collections import Counter

import pytest
from wordgame.engine import (
    LengthMismatchError,
    Mark,
    Vocabulary,
    filter_candidates,
    is_solved,
    pattern_string,
    score,
)

E, P, A = Mark.EXACT, Mark.PRESENT, Mark.ABSENT

WORDS = ["crane", "raise", "stare", "trace", "cared", "level", "belle", "speed",
         "erase", "abbey", "babes", "scoop", "cools", "eerie", "geese"]


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("target,guess,expected", [
    ("level", "belle", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
    ("speed", "erase", "Y--YY"),
    ("abbey", "babes", "YYGG-"),
    ("geese", "eerie", "YG--G"),
])
def test_score_golden(target, guess, expected):
    assert pattern_string(score(target, guess)) == expected


def test_speed_erase_hands_out_only_two_es():
    fb = score("speed", "erase")
    assert fb == (P, A, A, P, P)
    e_marks = [m for ch, m in zip("erase", fb) if ch == "e" and m is not A]
    assert len(e_marks) == Counter("speed")["e"]


def test_exact_match_consumes_before_present():
    # the second 'o' is exact, so the leading 'o' has nothing left to claim
    assert score("robot", "oozoz") == (A, E, A, E, A)


@pytest.mark.parametrize("w", WORDS)
def test_score_self_is_all_exact(w):
    fb = score(w, w)
    assert fb == (E,) * 5
    assert is_solved(fb)


def test_marks_never_exceed_target_multiplicity():
    for target, guess in itertools.product(WORDS, repeat=2):
        fb = score(target, guess)
        claimed = Counter(ch for ch, m in zip(guess, fb) if m is not A)
        tc = Counter(target)
        for ch, n in claimed.items():
            assert n <= tc[ch], (target, guess, fb)


def test_score_is_deterministic():
    assert score("speed", "erase") == score("speed", "erase")
    assert isinstance(score("crane", "trace"), tuple)


@pytest.mark.parametrize("target,guess", [
    ("crane", "cranes"),
    ("cran", "crane"),
    ("", ""),
])
def test_score_length_mismatch(target, guess):
    with pytest.raises(LengthMismatchError):
        score(target, guess)


def test_scorer_does_not_normalize_case():
    assert score("crane", "CRANE") == (A,) * 5


def test_filter_candidates_history():
    vocab = Vocabulary(["crane", "raise", "stare", "trace", "cared", "racer", "scoop"])
    history = [("raise", score("crane", "raise"))]
    cand = filter_candidates(vocab, history)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand
    assert "raise" not in cand


def test_filter_candidates_empty_history_keeps_order():
    assert filter_candidates(["stare", "crane"], []) == ["stare", "crane"]
