"""Request context middleware.

- ``RequestIdMiddleware`` tags every request with an ID.
- ``TenantContextMiddleware`` exposes the token's tenant and user on
  ``request.state`` and in the structlog context for log correlation.

Neither middleware authorizes anything; route dependencies do that.
"""

import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.core.auth.backend import decode_token


if TYPE_CHECKING:
    from starlette.types import ASGIApp


PUBLIC_PATHS = ("/health", "/info", "/docs", "/redoc", "/openapi.json")


class TenantContextMiddleware(BaseHTTPMiddleware):
    """Bind tenant_id and user_id from a bearer token to the request."""

    def __init__(
        self,
        app: "ASGIApp",
        exclude_paths: tuple[str, ...] = PUBLIC_PATHS,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path.startswith(self.exclude_paths):
            return await call_next(request)

        auth_header = request.headers.get("Authorization", "")
        scheme, _, token = auth_header.partition(" ")
        token_data = decode_token(token) if scheme == "Bearer" and token else None

        if token_data:
            request.state.tenant_id = token_data.tenant_id
            request.state.user_id = token_data.user_id
            structlog.contextvars.bind_contextvars(
                tenant_id=str(token_data.tenant_id),
                user_id=str(token_data.user_id),
            )

        return await call_next(request)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Add a request ID to request state, response headers and log context.

    An incoming ``X-Request-ID`` header is reused so callers can
    correlate their own logs.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        request.state.request_id = request_id
        request.state.trace_id = request_id  # Read by the error handlers

        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars(
                "request_id", "tenant_id", "user_id"
            )

        response.headers["X-Request-ID"] = request_id
        return response
