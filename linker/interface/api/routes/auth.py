"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from linker.application.session import LinkSession
from linker.application.usecase.auth import (
    BeginDiscordLoginRequest,
    BeginDiscordLoginUseCase,
    BeginSteamLoginUseCase,
    CompleteDiscordLoginRequest,
    CompleteDiscordLoginUseCase,
    CompleteSteamLoginRequest,
    CompleteSteamLoginUseCase,
    LogoutUseCase,
)
from linker.interface.api.dependencies import get_link_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


@router.get("/discord")
async def discord_login(
    use_case: FromDishka[BeginDiscordLoginUseCase],
    session: LinkSession = Depends(get_link_session),
    redirect: str | None = None,
) -> RedirectResponse:
    """Redirect to Discord for authorization.

    Args:
        use_case: Begin Discord login use case from DI
        session: Current browser session
        redirect: Optional local path to land on after the callback

    Returns:
        HTTP 302 redirect to Discord

    Example:
        GET /auth/discord?redirect=/link.html
    """
    auth_url = await use_case.execute(
        BeginDiscordLoginRequest(return_path=redirect), session
    )
    return _redirect(auth_url)


@router.get("/discord/callback")
async def discord_callback(
    use_case: FromDishka[CompleteDiscordLoginUseCase],
    session: LinkSession = Depends(get_link_session),
    code: str | None = None,
) -> RedirectResponse:
    """Handle the Discord OAuth callback.

    Exchanges the code, stores the Discord user in the session and links it
    with a Steam identity already present in the session.

    Returns:
        HTTP 302 redirect to the remembered path or /home.html

    Example:
        GET /auth/discord/callback?code=abc123
    """
    logger.info(f"Discord callback received: has_code={bool(code)}")
    redirect_path = await use_case.execute(
        CompleteDiscordLoginRequest(code=code), session
    )
    logger.info(f"Discord login complete, redirecting to: {redirect_path}")
    return _redirect(redirect_path)


@router.get("/steam")
async def steam_login(use_case: FromDishka[BeginSteamLoginUseCase]) -> RedirectResponse:
    """Redirect to Steam OpenID sign-in."""
    return _redirect(await use_case.execute())


@router.get("/steam/callback")
async def steam_callback(
    request: Request,
    use_case: FromDishka[CompleteSteamLoginUseCase],
    session: LinkSession = Depends(get_link_session),
) -> RedirectResponse:
    """Handle the Steam OpenID callback.

    The full query string is forwarded because every ``openid.*`` field is
    re-posted to Steam for verification.

    Returns:
        HTTP 302 redirect to /link.html

    Example:
        GET /auth/steam/callback?openid.mode=id_res&openid.claimed_id=...
    """
    redirect_path = await use_case.execute(
        CompleteSteamLoginRequest(params=dict(request.query_params)), session
    )
    logger.info("Steam login complete")
    return _redirect(redirect_path)


@router.get("/logout")
async def logout(
    use_case: FromDishka[LogoutUseCase],
    session: LinkSession = Depends(get_link_session),
) -> RedirectResponse:
    """Destroy the session and return to the landing page."""
    return _redirect(await use_case.execute(session))
