"""
Scoring API: total score, grade, advice and component breakdown.
The password is read from the request body only; it is never echoed or logged.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from passcore import advice_for, grade_for_score, score_components
from passcore.matcher import CLOSE_DISTANCE, LENGTH_SPREAD, NEAR_DISTANCE
from passcore.review import GRADE_THRESHOLDS
from passcore.score import MAX_LENGTH_SCORE, MAX_UNIQUENESS_SCORE, PENALTY_POINTS, VARIETY_POINTS

from ..config import MAX_PASSWORD_LENGTH, RATE_LIMIT_SCORE_PER_MINUTE
from ..rate_limit import check_rate_limit, client_id

router = APIRouter(prefix="/api", tags=["score"])


class ScoreRequest(BaseModel):
    password: str = Field(max_length=MAX_PASSWORD_LENGTH)


class ComponentsModel(BaseModel):
    length: int
    variety: int
    uniqueness: int
    penalty: int


class ScoreResponse(BaseModel):
    score: int
    grade: str
    review: str
    components: ComponentsModel


@router.post("/score", response_model=ScoreResponse)
def score_password(body: ScoreRequest, request: Request):
    """Score a password. Response holds numbers and fixed strings only."""
    check_rate_limit(client_id(request), "score", RATE_LIMIT_SCORE_PER_MINUTE)
    components = score_components(body.password)
    total = components.total
    return ScoreResponse(
        score=total,
        grade=grade_for_score(total),
        review=advice_for(components),
        components=ComponentsModel(**components._asdict()),
    )


@router.get("/policy")
def scoring_policy():
    """Fixed scoring constants, for transparency. No auth required."""
    return {
        "max_length_score": MAX_LENGTH_SCORE,
        "variety_points": list(VARIETY_POINTS),
        "max_uniqueness_score": MAX_UNIQUENESS_SCORE,
        "penalty_points": {kind.value: points for kind, points in PENALTY_POINTS.items()},
        "matching": {
            "length_spread": LENGTH_SPREAD,
            "close_distance": CLOSE_DISTANCE,
            "near_distance": NEAR_DISTANCE,
        },
        "grades": [{"min_score": m, "grade": g} for m, g in GRADE_THRESHOLDS],
    }
