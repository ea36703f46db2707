"""Simple in-memory rate limiter per client (by remote host)."""
import logging
import time

from fastapi import HTTPException, Request

from .config import RATE_LIMIT_WINDOW_SECONDS

logger = logging.getLogger(__name__)

# (client, key) -> timestamps in window; keys with no recent request are swept
_store: dict[str, list[float]] = {}
_last_sweep = 0.0


def client_id(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _sweep(cutoff: float) -> None:
    """Drop every key whose newest request is older than the window."""
    stale = [k for k, stamps in _store.items() if not stamps or stamps[-1] <= cutoff]
    for k in stale:
        del _store[k]


def check_rate_limit(
    client: str,
    key: str,
    max_per_window: int,
    window_seconds: float = RATE_LIMIT_WINDOW_SECONDS,
) -> None:
    """Raise 429 if client has exceeded max_per_window requests in the last window_seconds."""
    global _last_sweep
    now = time.monotonic()
    cutoff = now - window_seconds
    if now - _last_sweep >= window_seconds:
        _sweep(cutoff)
        _last_sweep = now
    k = f"{client}:{key}"
    window = [t for t in _store.get(k, ()) if t > cutoff]
    if len(window) >= max_per_window:
        _store[k] = window
        logger.warning("rate limit hit for %s on %s", client, key)
        raise HTTPException(
            status_code=429,
            detail="Too many requests. Please try again in a minute.",
        )
    window.append(now)
    _store[k] = window


def reset() -> None:
    """Clear all windows (tests)."""
    global _last_sweep
    _store.clear()
    _last_sweep = 0.0
