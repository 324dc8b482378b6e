"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from puppies import __version__
from puppies.config import Settings
from puppies.domain.service import ImageService

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    environment: str
    images: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    image_service: FromDishka[ImageService],
) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status with the number of registered images
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version=__version__,
        environment=settings.environment,
        images=len(image_service.all()),
    )
