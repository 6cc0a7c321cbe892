"""
Request observability middleware.

CorrelationMiddleware binds the correlation ID and acting user of each
request. RequestLoggingMiddleware writes one access line per request, with
health probes demoted to DEBUG and server errors raised to WARNING.

Dependencies: starlette, learnhub.observability.correlation
System role: Request/response observability injection
"""

import logging
import time
from collections.abc import Sequence

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from learnhub.observability.correlation import bind_request_context, reset_request_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
DEFAULT_USER_HEADER = "X-User-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One access log line per HTTP request."""

    def __init__(self, app: ASGIApp, quiet_paths: Sequence[str] = ()) -> None:
        """
        Args:
            app: Wrapped ASGI application
            quiet_paths: Path prefixes logged at DEBUG (health probes)
        """
        super().__init__(app)
        self._quiet_paths = tuple(quiet_paths)

    def _level_for(self, path: str, status_code: int) -> int:
        if status_code >= 500:
            return logging.WARNING
        if path.startswith(self._quiet_paths):
            return logging.DEBUG
        return logging.INFO

    async def dispatch(self, request: Request, call_next):
        method = request.method
        path = request.url.path
        started = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - Exception",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                    "error_type": type(e).__name__,
                },
            )
            raise

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.log(
            self._level_for(path, response.status_code),
            f"{method} {path} - {response.status_code} ({duration_ms} ms)",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Binds correlation ID and user ID for the duration of a request."""

    def __init__(self, app: ASGIApp, user_header: str = DEFAULT_USER_HEADER) -> None:
        super().__init__(app)
        self._user_header = user_header

    async def dispatch(self, request: Request, call_next):
        """
        Bind request ids and echo the correlation ID in the response.

        A missing or malformed X-Correlation-ID is replaced by a generated one.
        """
        correlation_id, tokens = bind_request_context(
            request.headers.get(CORRELATION_HEADER),
            request.headers.get(self._user_header),
        )
        try:
            response: Response = await call_next(request)
        finally:
            reset_request_context(tokens)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
