"""
Health check endpoints.

/health and /ready are open so orchestrators can probe the service;
/ping sits behind the API key gate with the domain routes.
"""

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from shared.database import check_connection
from ..dependencies import ServiceContainer, get_container

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


class PingResponse(BaseModel):
    """Ping response model."""

    message: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    container: ServiceContainer = Depends(get_container),
) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=container.settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(
    response: Response,
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Returns 503 when the database does not answer.
    """
    if check_connection(container.engine):
        return ReadinessResponse(status="ready", database="connected")

    response.status_code = 503
    return ReadinessResponse(status="unavailable", database="unreachable")


@router.get("/ping", response_model=PingResponse)
async def ping() -> PingResponse:
    """Liveness ping."""
    return PingResponse(message="pong")
