import pytest

from core.strength_utils import StrengthLevel, score_password, strength_level


def test_single_lowercase_char():
    r = score_password("a")
    assert r.score == 10
    assert r.level is StrengthLevel.WEAK
    assert r.label == "Weak"


def test_empty_password():
    r = score_password("")
    assert r.score == 0
    assert r.level is StrengthLevel.WEAK


def test_length_twelve_all_classes():
    r = score_password("Abcdefgh12!@")
    assert r.score == 80
    assert r.level is StrengthLevel.VERY_STRONG
    assert r.label == "Very Strong"


def test_length_thresholds_are_cumulative():
    assert score_password("a" * 20).score == 80 + 10
    assert score_password("a" * 21).score == 80 + 10 + 10


def test_score_is_capped():
    r = score_password("aA1!" * 10)
    assert r.score == 100


def test_non_ascii_counts_as_other():
    assert score_password("é").score == 10


@pytest.mark.parametrize(
    "score, level",
    [(0, "weak"), (29, "weak"), (30, "medium"), (59, "medium"), (60, "strong"), (79, "strong"), (80, "very-strong")],
)
def test_level_thresholds(score, level):
    assert strength_level(score).value == level


def test_scoring_is_deterministic():
    assert score_password("Tr0ub4dor&3") == score_password("Tr0ub4dor&3")
