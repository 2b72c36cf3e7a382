from __future__ import annotations

import logging
import time
from typing import Callable, cast

from app.core.redis_client import get_redis
from fastapi import HTTPException, Request
from redis import Redis

logger = logging.getLogger(__name__)


def client_address(request: Request) -> str:
    # Forwarded headers are only honoured through uvicorn's --proxy-headers /
    # --forwarded-allow-ips, which rewrite request.client for trusted proxies.
    return request.client.host if request.client else "unknown"


def enforce_rate_limit(
    scope: str,
    key: str,
    *,
    limit: int,
    window_seconds: int,
) -> None:
    """Fixed-window counter using Redis INCR + EXPIRE; raises 429 past ``limit``.

    If Redis is unavailable, this is a no-op (fail open).
    """
    r = get_redis()
    if r is None:
        return

    now = int(time.time())
    bucket = now // window_seconds
    redis_key = f"rl:{scope}:{key}:{bucket}"

    try:
        # redis-py stubs type incr as `Awaitable[Any] | Any`
        count = cast(int, cast(Redis, r).incr(redis_key))
        if count == 1:
            cast(Redis, r).expire(redis_key, window_seconds)
    except Exception:
        logger.exception("rate limiter backend error; allowing request")
        return

    if count > limit:
        retry_after = max(1, window_seconds - (now % window_seconds))
        raise HTTPException(
            status_code=429,
            detail="Rate limit exceeded",
            headers={"Retry-After": str(retry_after)},
        )


def rate_limiter(
    scope: str,
    *,
    limit: int,
    window_seconds: int,
) -> Callable[[Request], None]:
    """Dependency limiting requests per client address."""

    def _dep(request: Request) -> None:
        enforce_rate_limit(
            scope,
            client_address(request),
            limit=limit,
            window_seconds=window_seconds,
        )

    return _dep
