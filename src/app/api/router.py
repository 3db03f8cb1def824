"""Top-level router: unauthenticated probes plus the versioned API."""

from fastapi import APIRouter

from app.api import health
from app.modules import discover_modules


API_PREFIX = "/api/v1"


def build_api_router() -> APIRouter:
    """Assemble the probes and every discovered module under ``/api/v1``."""
    v1 = APIRouter(prefix=API_PREFIX)
    for module_router in discover_modules():
        v1.include_router(module_router)

    root = APIRouter()
    root.include_router(health.router)
    root.include_router(v1)
    return root


api_router = build_api_router()
