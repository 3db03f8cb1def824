"""Access logging.

One ``request_completed`` event per request, with status and duration;
its level follows the status class so failed admissions (409) and
validation errors (422) stand out from successful traffic. The request
ID, tenant and user are already in the structlog context, bound by the
middleware that runs before this one.
"""

import time
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint


if TYPE_CHECKING:
    from starlette.types import ASGIApp


logger = structlog.get_logger()

QUIET_PATHS = ("/health/", "/docs", "/redoc", "/openapi.json")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request's outcome and latency; probes and docs are skipped."""

    def __init__(self, app: "ASGIApp", quiet_paths: tuple[str, ...] = QUIET_PATHS) -> None:
        super().__init__(app)
        self.quiet_paths = quiet_paths

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path.startswith(self.quiet_paths):
            return await call_next(request)

        started = time.perf_counter()
        log = logger.bind(
            method=request.method,
            path=request.url.path,
            client_ip=get_client_ip(request),
        )
        log.debug("request_started", query=request.url.query or None)

        try:
            response = await call_next(request)
        except Exception:
            log.exception("request_failed", duration_ms=_elapsed_ms(started))
            raise

        status_code = response.status_code
        if status_code >= 500:
            emit = log.error
        elif status_code >= 400:
            emit = log.warning
        else:
            emit = log.info
        emit("request_completed", status_code=status_code, duration_ms=_elapsed_ms(started))

        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def get_client_ip(request: Request) -> str | None:
    """Client address, preferring the first hop of X-Forwarded-For."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",", 1)[0].strip()
    return request.client.host if request.client else None
