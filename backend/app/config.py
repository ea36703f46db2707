"""App configuration from environment."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Project root for passcore, benchmark
ROOT_DIR = Path(__file__).resolve().parent.parent.parent

# Load .env from backend directory
load_dotenv(str(ROOT_DIR / "backend" / ".env"))


def _cors_origins() -> list[str]:
    raw = os.environ.get(
        "PASSCORE_CORS_ORIGINS",
        "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173,http://127.0.0.1:3000",
    )
    return [p.strip() for p in raw.split(",") if p.strip()]


CORS_ORIGINS = _cors_origins()

# Input validation
MAX_PASSWORD_LENGTH = int(os.environ.get("PASSCORE_MAX_PASSWORD_LENGTH", 1024))

# Rate limits (per client): requests per window
RATE_LIMIT_SCORE_PER_MINUTE = int(os.environ.get("PASSCORE_RATE_LIMIT_SCORE", 120))
RATE_LIMIT_BENCHMARK_PER_MINUTE = int(os.environ.get("PASSCORE_RATE_LIMIT_BENCHMARK", 2))
RATE_LIMIT_WINDOW_SECONDS = 60
