"""Request logging middleware: log method, path, status_code, duration_ms and payload size for every request."""
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with method, path, status_code, duration_ms, content_length."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "request method=%s path=%s status=%s duration_ms=%.1f content_length=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request.headers.get("content-length", "0"),
        )
        return response
