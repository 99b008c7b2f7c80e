"""HTTP middleware."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("pokedex_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status, duration and client IP for every request.

    5xx responses are logged at ERROR, 4xx at WARNING, the rest at INFO.
    Request bodies and headers are never logged.
    """

    SKIPPED_PATHS = {"/health"}

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors become a 500 in the outer error handler
            self._log(request, 500, start_time)
            raise

        self._log(request, response.status_code, start_time)
        return response

    @staticmethod
    def _log(request: Request, status: int, start_time: float) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000

        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        client_ip = request.client.host if request.client else "unknown"
        logger.log(
            log_level,
            "%s %s %d %.1fms from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            client_ip,
        )
