"""
Benchmark API: run the corpus matching benchmark on synthetic data.
Does not touch the loaded corpus.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi import APIRouter, Request

from ..config import RATE_LIMIT_BENCHMARK_PER_MINUTE
from ..rate_limit import check_rate_limit, client_id

router = APIRouter(prefix="/api/benchmark", tags=["benchmark"])


@router.post("/run")
def run_benchmark_endpoint(request: Request):
    """
    Run the matching benchmark (1k, 10k, 100k synthetic entries).
    Returns metrics JSON for frontend graph rendering.
    """
    check_rate_limit(client_id(request), "benchmark", RATE_LIMIT_BENCHMARK_PER_MINUTE)
    from benchmark import run_benchmark, BENCHMARK_COUNTS
    return run_benchmark(counts=BENCHMARK_COUNTS)
