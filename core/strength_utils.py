# core/strength_utils.py
from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_OTHER = re.compile(r"[^a-zA-Z0-9]")

# Cumulative: every threshold reached adds its points
_LENGTH_STEPS = (8, 12, 16, 20)


class StrengthLevel(Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    StrengthLevel.WEAK: "Weak",
    StrengthLevel.MEDIUM: "Medium",
    StrengthLevel.STRONG: "Strong",
    StrengthLevel.VERY_STRONG: "Very Strong",
}


@dataclass(frozen=True)
class StrengthResult:
    score: int
    level: StrengthLevel
    label: str


def strength_level(score: int) -> StrengthLevel:
    if score < 30:  return StrengthLevel.WEAK
    if score < 60:  return StrengthLevel.MEDIUM
    if score < 80:  return StrengthLevel.STRONG
    return StrengthLevel.VERY_STRONG


def score_password(password: str) -> StrengthResult:
    """
    Heuristic 0..100 score from length and character variety.
    """
    n = len(password)
    score = sum(20 for step in _LENGTH_STEPS if n >= step)

    for rx in (_LOWER, _UPPER, _DIGIT, _OTHER):
        if rx.search(password):
            score += 10

    if n > 20:
        score += 10

    score = max(0, min(score, 100))
    level = strength_level(score)
    return StrengthResult(score=score, level=level, label=level.label)
