"""Letter grade and one-line advice derived from the score components."""

from typing import Optional

from .corpus import CorpusIndex
from .score import ScoreComponents, score_components

# (minimum total, grade), highest first; anything below the last row is F
GRADE_THRESHOLDS = (
    (900, "A+"),
    (850, "A"),
    (800, "A-"),
    (750, "B+"),
    (700, "B"),
    (650, "B-"),
    (600, "C+"),
    (550, "C"),
    (500, "C-"),
    (450, "D+"),
    (400, "D"),
    (350, "D-"),
)
GRADES = tuple(g for _, g in GRADE_THRESHOLDS) + ("F",)

ADVICE_TOO_SHORT = "Too short. Make it longer."
ADVICE_VARIETY = "Mix uppercase, lowercase, digits and symbols."
ADVICE_REPEATS = "Too many repeated characters. Use more unique ones."
ADVICE_TOO_COMMON = "Password is too common. Change it."
ADVICE_SIMILAR = "Password is similar to a common one. Change it."


def grade_for_score(total: int) -> str:
    for minimum, letter in GRADE_THRESHOLDS:
        if total >= minimum:
            return letter
    return "F"


def advice_for(components: ScoreComponents) -> str:
    """
    Advice for the weakest category. Length is halved before comparing since
    it is worth twice as much as the others.
    """
    length = components.length // 2
    weakest = min(length, components.variety, components.uniqueness, components.penalty)
    if length == weakest:
        return ADVICE_TOO_SHORT
    elif components.variety == weakest:
        return ADVICE_VARIETY
    elif components.uniqueness == weakest:
        return ADVICE_REPEATS
    elif components.penalty == weakest:
        if components.exact_match:
            return ADVICE_TOO_COMMON
        return ADVICE_SIMILAR
    raise AssertionError("weakest score component matched no category")


def grade(password: str, index: Optional[CorpusIndex] = None) -> str:
    return grade_for_score(score_components(password, index).total)


def review(password: str, index: Optional[CorpusIndex] = None) -> str:
    return advice_for(score_components(password, index))
