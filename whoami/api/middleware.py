"""Request summary logging middleware."""

from __future__ import annotations

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, client, status and duration of every HTTP request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.perf_counter()
        client = f"{request.client.host}:{request.client.port}" if request.client else "-"
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "method=%s path=%s client=%s status=500 duration_ms=%.2f",
                request.method,
                request.url.path,
                client,
                self._elapsed_ms(start_time),
            )
            raise

        logger.debug(
            "method=%s path=%s client=%s status=%d duration_ms=%.2f",
            request.method,
            request.url.path,
            client,
            response.status_code,
            self._elapsed_ms(start_time),
        )
        return response

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        """Return elapsed milliseconds rounded to two decimals."""

        return round((time.perf_counter() - start_time) * 1000, 2)
