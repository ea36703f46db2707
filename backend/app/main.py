"""FastAPI application: CORS, scoring and benchmark routes."""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS
from .routes import benchmark, score

app = FastAPI(
    title="Password Strength API",
    description="Score passwords by length, variety, uniqueness and resemblance to common passwords",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(score.router)
app.include_router(benchmark.router)


@app.get("/api/health")
def health():
    return {"status": "ok"}
