"""
Request logging middleware.

Logs each HTTP request with timing and, for uploads, the declared body size.
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

DEFAULT_SKIP_PATHS = frozenset({"/", "/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request with method, path, client, status and duration.

    Adds X-Process-Time and X-Request-ID headers to responses. Liveness
    probes are not logged.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        logger_instance: logging.Logger | None = None,
        skip_paths: set[str] | None = None,
    ) -> None:
        super().__init__(app)
        self._logger = logger_instance or logger
        self._skip_paths = set(DEFAULT_SKIP_PATHS if skip_paths is None else skip_paths)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.url.path in self._skip_paths:
            return await call_next(request)

        start_time = time.perf_counter()
        context = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": get_client_ip(request),
            "request_id": request.headers.get("x-request-id", "unknown"),
        }
        content_length = request.headers.get("content-length")
        if content_length:
            context["content_length"] = content_length

        self._logger.info(
            f"{context['method']} {context['path']} started",
            extra={"event": "request_started", **context},
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self._logger.error(
                f"{context['method']} {context['path']} failed",
                extra={
                    "event": "request_failed",
                    **context,
                    "error": str(e),
                    "duration_ms": round(duration_ms, 2),
                },
                exc_info=True,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._logger.info(
            f"{context['method']} {context['path']} -> {response.status_code}",
            extra={
                "event": "request_completed",
                **context,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )

        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"
        response.headers["X-Request-ID"] = context["request_id"]
        return response


def get_client_ip(request: Request) -> str:
    """
    Extract client IP address from request.

    Honours X-Forwarded-For and X-Real-IP set by a reverse proxy.
    """
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"
