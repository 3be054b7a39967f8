"""
Health check endpoint.
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running, along with which services it hosts.
    """
    settings = request.app.state.settings
    return HealthResponse(
        status="healthy",
        service=settings.service_role,
        version=settings.app_version,
    )
