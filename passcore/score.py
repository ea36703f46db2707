"""
Password sub-scores and their sum.

Length is worth up to 400 points, variety, uniqueness and penalty up to 200
each. An exact corpus match zeroes the total whatever the other components say.
The password is never logged; only component values are.
"""

import logging
from typing import NamedTuple, Optional

from .corpus import CorpusIndex, default_index
from .matcher import MatchKind, classify, normalize

logger = logging.getLogger(__name__)

MAX_LENGTH_SCORE = 400

# Distinct character classes -> points
VARIETY_POINTS = (0, 25, 70, 130, 200)

MAX_UNIQUENESS_SCORE = 200

# Resemblance to the corpus -> points (higher is better)
PENALTY_POINTS = {
    MatchKind.EXACT: 0,
    MatchKind.CLOSE: 50,
    MatchKind.NEAR: 150,
    MatchKind.DISTANT: 200,
}


class ScoreComponents(NamedTuple):
    length: int
    variety: int
    uniqueness: int
    penalty: int

    @property
    def exact_match(self) -> bool:
        return self.penalty == PENALTY_POINTS[MatchKind.EXACT]

    @property
    def total(self) -> int:
        if self.exact_match:
            return 0
        return self.length + self.variety + self.uniqueness + self.penalty


def score_length(password: str) -> int:
    """
    Length score by character count:
    1-4 chars n*2+2, 5-8 n*6+2, 9-12 n*12+6, 13-16 n*15+10, 17-24 n*15,
    25-39 n*5/2+300, 40+ capped at 400.
    """
    n = len(password)
    if n == 0:
        score = 0
    elif n <= 4:
        score = n * 2 + 2
    elif n <= 8:
        score = n * 6 + 2
    elif n <= 12:
        score = n * 12 + 6
    elif n <= 16:
        score = n * 15 + 10
    elif n <= 24:
        score = n * 15
    elif n <= 39:
        score = n * 5 // 2 + 300
    else:
        score = MAX_LENGTH_SCORE
    return min(score, MAX_LENGTH_SCORE)


def score_variety(password: str) -> int:
    """Points for how many of lowercase, uppercase, digit, symbol appear."""
    seen = set()
    for c in password:
        if c.islower():
            seen.add("lower")
        elif c.isupper():
            seen.add("upper")
        elif c.isdecimal():
            seen.add("digit")
        else:
            seen.add("symbol")
        if len(seen) == 4:
            break
    return VARIETY_POINTS[len(seen)]


def score_uniqueness(password: str) -> int:
    """Distinct characters over total characters, scaled to 0-200 (rounded half up)."""
    n = len(password)
    if n == 0:
        return 0
    unique = len(set(password))
    return (unique * MAX_UNIQUENESS_SCORE * 2 + n) // (2 * n)


def score_penalty(password: str, index: Optional[CorpusIndex] = None) -> int:
    """Resemblance to known weak passwords: 0 exact, 50 close, 150 near, 200 distant."""
    if index is None:
        index = default_index()
    result = classify(normalize(password), index)
    return PENALTY_POINTS[result.kind]


def score_components(password: str, index: Optional[CorpusIndex] = None) -> ScoreComponents:
    components = ScoreComponents(
        length=score_length(password),
        variety=score_variety(password),
        uniqueness=score_uniqueness(password),
        penalty=score_penalty(password, index),
    )
    logger.debug(
        "components length=%d variety=%d uniqueness=%d penalty=%d",
        components.length, components.variety, components.uniqueness, components.penalty,
    )
    return components


def score(password: str, index: Optional[CorpusIndex] = None) -> int:
    """Total score. Never logs or stores the password."""
    return score_components(password, index).total


# Names used by callers that think in terms of "sub-scores"
length_subscore = score_length
variety_subscore = score_variety
uniqueness_subscore = score_uniqueness
penalty_subscore = score_penalty
