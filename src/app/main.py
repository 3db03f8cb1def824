"""FastAPI application factory.

Run with ``uvicorn app.main:create_app --factory``.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.config import settings
from app.core.auth import RequestIdMiddleware, TenantContextMiddleware
from app.core.database import async_engine
from app.core.errors import register_exception_handlers
from app.core.logging import RequestLoggingMiddleware, configure_logging


configure_logging(settings.log_level, json_output=settings.is_production)

logger = structlog.get_logger()

DEV_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and release the connection pool on shutdown."""
    logger.info(
        "application_startup",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    yield

    await async_engine.dispose()
    logger.info("application_shutdown")


def add_middleware(app: FastAPI) -> None:
    """Install the middleware stack.

    Starlette runs the last-added middleware first, so a request passes
    through request ID, tenant context, access logging and CORS, in
    that order.
    """
    origins = settings.cors_origins or (DEV_CORS_ORIGINS if settings.is_development else [])
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(TenantContextMiddleware)
    app.add_middleware(RequestIdMiddleware)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    docs_enabled = not settings.is_production

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant resource booking with conflict-checked admission",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    add_middleware(app)
    register_exception_handlers(app)
    app.include_router(api_router)

    return app
