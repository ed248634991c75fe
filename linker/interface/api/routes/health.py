"""Health check route."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from linker.config import Settings

VERSION = "0.1.0"

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness plus which optional integrations are configured."""

    status: str
    timestamp: datetime
    version: str
    discord_configured: bool
    steam_persona_lookup: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report liveness.

    An unconfigured Discord app is not a failure: Steam login and the static
    pages keep working, so status stays ``healthy``.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=VERSION,
        discord_configured=settings.discord.configured,
        steam_persona_lookup=settings.steam.api_key is not None,
    )
