import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request: method, path, query, status and duration."""

    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed after %.2fs",
                request.method,
                request.url.path,
                time.monotonic() - start,
            )
            raise

        duration = time.monotonic() - start
        query = f"?{request.url.query}" if request.url.query else ""
        logger.info(
            "%s %s%s -> %s (%.2fs)",
            request.method,
            request.url.path,
            query,
            response.status_code,
            duration,
        )

        return response
