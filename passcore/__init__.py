"""Password strength scoring against a corpus of known weak passwords."""

from .corpus import (
    CorpusEntry,
    CorpusError,
    CorpusIndex,
    default_index,
    reset_default_index,
)
from .distance import bounded_levenshtein
from .matcher import MatchKind, MatchResult, classify, normalize
from .score import (
    ScoreComponents,
    score,
    score_components,
    score_length,
    score_variety,
    score_uniqueness,
    score_penalty,
    length_subscore,
    variety_subscore,
    uniqueness_subscore,
    penalty_subscore,
)
from .review import GRADES, advice_for, grade, grade_for_score, review

__all__ = [
    "CorpusEntry",
    "CorpusError",
    "CorpusIndex",
    "default_index",
    "reset_default_index",
    "bounded_levenshtein",
    "MatchKind",
    "MatchResult",
    "classify",
    "normalize",
    "ScoreComponents",
    "score",
    "score_components",
    "score_length",
    "score_variety",
    "score_uniqueness",
    "score_penalty",
    "length_subscore",
    "variety_subscore",
    "uniqueness_subscore",
    "penalty_subscore",
    "GRADES",
    "advice_for",
    "grade",
    "grade_for_score",
    "review",
]
