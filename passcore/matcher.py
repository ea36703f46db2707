"""
Resemblance of a password to the weak-password corpus.

classify() walks the corpus in file order:
1. exact membership, before any distance work;
2. length pruning (|len diff| <= LENGTH_SPREAD) via the index's length buckets;
3. boundary filter: same first character or same last character;
4. bounded Levenshtein with cutoff NEAR_DISTANCE.
The first candidate within CLOSE_DISTANCE wins outright. Otherwise the first
candidate within NEAR_DISTANCE is reported once the scan is done.
"""

from enum import Enum
from typing import Iterator, NamedTuple, Optional

from .corpus import CorpusEntry, CorpusIndex
from .distance import bounded_levenshtein

LENGTH_SPREAD = 3
CLOSE_DISTANCE = 2
NEAR_DISTANCE = 4


class MatchKind(Enum):
    EXACT = "exact"
    CLOSE = "close"
    NEAR = "near"
    DISTANT = "distant"


class MatchResult(NamedTuple):
    kind: MatchKind
    distance: Optional[int] = None
    entry: Optional[CorpusEntry] = None


DISTANT = MatchResult(MatchKind.DISTANT)


def normalize(password: str) -> str:
    """Trim surrounding whitespace and lowercase, skipping either step when it is a no-op."""
    if password and (password[0].isspace() or password[-1].isspace()):
        password = password.strip()
    # Titlecase letters (e.g. U+01C5) change under lower() without being isupper()
    lowered = password.lower()
    if lowered != password:
        password = lowered
    return password


def boundary_candidates(normalized: str, index: CorpusIndex) -> Iterator[CorpusEntry]:
    """Entries of nearby length sharing the first or the last character, in corpus order."""
    if not normalized:
        return
    first, last = normalized[0], normalized[-1]
    for entry in index.candidates(len(normalized), LENGTH_SPREAD):
        if entry.first == first or entry.last == last:
            yield entry


def classify(normalized: str, index: CorpusIndex) -> MatchResult:
    """Exact / close / near / distant, for an already normalized input."""
    if normalized in index:
        return MatchResult(MatchKind.EXACT, 0)

    near: Optional[MatchResult] = None
    for entry in boundary_candidates(normalized, index):
        d = bounded_levenshtein(normalized, entry.normalized, NEAR_DISTANCE)
        if d <= CLOSE_DISTANCE:
            return MatchResult(MatchKind.CLOSE, d, entry)
        if d <= NEAR_DISTANCE and near is None:
            near = MatchResult(MatchKind.NEAR, d, entry)
    return near or DISTANT
