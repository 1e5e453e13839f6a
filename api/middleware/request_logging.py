"""
Request logging middleware.

Logs one line per request: method, path and latency truncated to whole
milliseconds, e.g. ``GET /api/drive 12ms``.
"""
import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger("dox.access")


def format_latency(seconds: float) -> str:
    """Render a duration truncated (not rounded) to milliseconds"""
    return f"{int(seconds * 1000)}ms"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Times every request and logs it after the response is produced."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        try:
            return await call_next(request)
        finally:
            logger.info(
                "%s %s %s",
                request.method,
                request.url.path,
                format_latency(time.perf_counter() - start),
            )
