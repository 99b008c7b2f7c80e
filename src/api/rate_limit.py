"""Per-IP rate limiting for public endpoints."""

import logging
import time

from fastapi import Request
from limits import parse
from limits.storage import MemoryStorage
from limits.strategies import MovingWindowRateLimiter

from src.config import get_settings
from src.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)

settings = get_settings()


def get_client_ip(request: Request) -> str:
    """Best guess at the caller's IP, honoring common proxy headers."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    for header in ("cf-connecting-ip", "x-real-ip"):
        value = request.headers.get(header)
        if value:
            return value
    return request.client.host if request.client else "unknown"


class RateLimiter:
    """FastAPI dependency enforcing a moving-window limit per client IP.

    Usage:
        limiter = RateLimiter("10/minute", scope="auth")

        @router.post("/login", dependencies=[Depends(limiter)])
    """

    def __init__(self, limit: str, scope: str):
        self.limit = parse(limit)
        self.scope = scope
        self.storage = MemoryStorage()
        self.strategy = MovingWindowRateLimiter(self.storage)

    def __call__(self, request: Request) -> None:
        client_ip = get_client_ip(request)
        if self.strategy.hit(self.limit, self.scope, client_ip):
            return

        reset_time, _ = self.strategy.get_window_stats(self.limit, self.scope, client_ip)
        retry_after = max(1, int(reset_time - time.time()) + 1)
        logger.warning(f"Rate limit exceeded for IP {client_ip} on {request.url.path}")
        raise RateLimitExceededError(retry_after=retry_after, context={"client_ip": client_ip})

    def reset(self) -> None:
        """Forget all recorded hits."""
        self.storage.reset()


# Shared by register and login so both count against the same budget
auth_rate_limiter = RateLimiter(settings.auth_rate_limit, scope="auth")
