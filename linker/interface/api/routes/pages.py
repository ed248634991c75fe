"""Landing page route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import FileResponse

from linker.config import Settings

router = APIRouter(tags=["pages"], route_class=DishkaRoute)


@router.get("/", include_in_schema=False)
async def home(settings: FromDishka[Settings]) -> FileResponse:
    """Serve the landing page."""
    return FileResponse(settings.static_dir / "home.html")
