"""Session status routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from linker.application.session import LinkSession
from linker.application.usecase.auth import GetCurrentUserUseCase
from linker.application.usecase.link import GetLinkStatusResponse, GetLinkStatusUseCase
from linker.domain.error import UnauthenticatedError
from linker.domain.value import DiscordUser
from linker.interface.api.dependencies import get_link_session

router = APIRouter(prefix="/api", tags=["session"], route_class=DishkaRoute)


class AuthStatusResponse(BaseModel):
    """Authenticated Discord user of this session."""

    authenticated: bool
    user: DiscordUser


@router.get(
    "/me",
    response_model=AuthStatusResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"description": "No Discord login yet"}},
)
async def get_current_user(
    use_case: FromDishka[GetCurrentUserUseCase],
    session: LinkSession = Depends(get_link_session),
):
    """Get the Discord user of this session.

    Examples:
        Authenticated (200):
        {"authenticated": true, "user": {"id": "...", "username": "...", ...}}

        Unauthenticated (401):
        {"authenticated": false}
    """
    try:
        user = await use_case.execute(session)
    except UnauthenticatedError:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"authenticated": False},
        )
    return AuthStatusResponse(authenticated=True, user=user)


@router.get("/link-status", response_model=GetLinkStatusResponse)
async def get_link_status(
    use_case: FromDishka[GetLinkStatusUseCase],
    session: LinkSession = Depends(get_link_session),
) -> GetLinkStatusResponse:
    """Report which identities this session holds.

    Example:
        {"steam": {"steamId": "7656...", "personaName": "alice"}, "discord": null}
    """
    return await use_case.execute(session)
