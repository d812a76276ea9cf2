"""Service banner and health check routes."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from blog.application.usecase.common import CamelModel
from blog.config import Settings
from blog.interface.api.envelope import Envelope, ok

VERSION = "1.0.0"

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class ServiceBanner(BaseModel):
    """Root endpoint response."""

    success: bool = True
    message: str
    version: str
    status: str


class HealthResponse(CamelModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str


@router.get("/", response_model=ServiceBanner)
async def banner() -> ServiceBanner:
    """Identify the service."""
    return ServiceBanner(message="Blog API Server", version=VERSION, status="running")


@router.get("/health", response_model=Envelope[HealthResponse])
async def health_check(settings: FromDishka[Settings]) -> Envelope[HealthResponse]:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return ok(
        HealthResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            version=VERSION,
            git_sha=settings.git_sha,
        )
    )
