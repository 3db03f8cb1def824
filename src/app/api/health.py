"""Probe and metadata endpoints, served without authentication."""

from typing import Literal

from fastapi import APIRouter, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.api.dependencies import DBSession
from app.config import settings


router = APIRouter(tags=["health"])


class LivenessResponse(BaseModel):
    status: Literal["alive"] = "alive"


class ReadinessResponse(BaseModel):
    """Outcome of each dependency check; any failure makes the service degraded."""

    status: Literal["ready", "degraded"]
    checks: dict[str, str]


class InfoResponse(BaseModel):
    app: str
    version: str
    environment: str
    debug: bool


@router.get("/health/live", response_model=LivenessResponse, summary="Liveness probe")
async def liveness() -> LivenessResponse:
    """Answer as long as the process can serve requests."""
    return LivenessResponse()


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ReadinessResponse}},
)
async def readiness(db: DBSession, response: Response) -> ReadinessResponse:
    """Report whether the database accepts queries."""
    checks: dict[str, str] = {}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except SQLAlchemyError as e:
        checks["database"] = type(e).__name__

    if all(result == "ok" for result in checks.values()):
        return ReadinessResponse(status="ready", checks=checks)

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", checks=checks)


@router.get("/info", response_model=InfoResponse, summary="Application info")
async def info() -> InfoResponse:
    return InfoResponse(
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        debug=settings.debug,
    )
