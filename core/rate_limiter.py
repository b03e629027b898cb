# core/rate_limiter.py

import math
import time
from collections import deque
from typing import Deque, Dict, Optional, Tuple

from fastapi import HTTPException, Request


# Per-process hit log; a restart or a second worker starts fresh
_hits: Dict[str, Deque[float]] = {}


def _prune(identifier: str, window_seconds: int, now: float) -> Deque[float]:
    """Drop expired hits; identifiers with none left are forgotten."""
    hits = _hits.get(identifier)
    if hits is None:
        return deque()
    while hits and hits[0] <= now - window_seconds:
        hits.popleft()
    if not hits:
        del _hits[identifier]
    return hits


def check_rate_limit(
    identifier: str,
    max_requests: int = 10,
    window_seconds: int = 60,
) -> Tuple[bool, int]:
    """
    Count a hit for `identifier` within a sliding window.
    Rejected hits are not recorded.

    Returns:
        Tuple of (allowed: bool, remaining: int)
    """
    now = time.time()
    hits = _prune(identifier, window_seconds, now)

    if len(hits) >= max_requests:
        return False, 0

    hits.append(now)
    _hits[identifier] = hits
    return True, max_requests - len(hits)


def seconds_until_reset(identifier: str, window_seconds: int = 60) -> int:
    now = time.time()
    hits = _prune(identifier, window_seconds, now)
    if not hits:
        return 0
    return max(1, math.ceil(hits[0] + window_seconds - now))


def reset_rate_limits():
    _hits.clear()


def get_rate_limit_identifier(request: Request, scope: Optional[str] = None) -> str:
    """Client IP (first X-Forwarded-For hop behind a proxy), namespaced by scope."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
    else:
        client_ip = request.client.host if request.client else "unknown"

    key = f"ip:{client_ip}"
    return f"{scope}:{key}" if scope else key


def require_rate_limit(
    request: Request,
    identifier: Optional[str] = None,
    max_requests: int = 10,
    window_seconds: int = 60
) -> int:
    """Raise 429 once the caller used up its window; else return what is left."""
    identifier = identifier or get_rate_limit_identifier(request)
    allowed, remaining = check_rate_limit(identifier, max_requests, window_seconds)

    if not allowed:
        raise HTTPException(
            status_code=429,
            detail=f"Too many attempts. Try again in {window_seconds} seconds.",
            headers={
                "X-RateLimit-Limit": str(max_requests),
                "X-RateLimit-Window": str(window_seconds),
                "Retry-After": str(seconds_until_reset(identifier, window_seconds)),
            }
        )

    return remaining


def rate_limit(scope: str, max_requests: int = 10, window_seconds: int = 60):
    """Route dependency: `dependencies=[Depends(rate_limit("login", 5))]`."""
    def dependency(request: Request) -> int:
        return require_rate_limit(
            request,
            identifier=get_rate_limit_identifier(request, scope),
            max_requests=max_requests,
            window_seconds=window_seconds,
        )
    return dependency
