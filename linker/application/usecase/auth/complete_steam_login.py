"""Complete Steam login use case."""

import logfire
from pydantic import BaseModel

from linker.application.session import LinkSession
from linker.domain.error import MissingClaimedIdError
from linker.domain.service import AuthService, LinkService

LINK_PAGE = "/link.html"


class CompleteSteamLoginRequest(BaseModel):
    """Steam OpenID callback parameters."""

    params: dict[str, str]  # Raw query string, openid.* and anything else


class CompleteSteamLoginUseCase:
    """Use case for verifying the Steam assertion and reconciling the link."""

    def __init__(self, auth_service: AuthService, link_service: LinkService) -> None:
        """Initialize complete Steam login use case.

        Args:
            auth_service: Authentication domain service
            link_service: Link domain service
        """
        self.auth_service = auth_service
        self.link_service = link_service

    async def execute(
        self, request: CompleteSteamLoginRequest, session: LinkSession
    ) -> str:
        """Execute Steam callback flow.

        The session and the link store are only touched after Steam has
        confirmed the assertion.

        Args:
            request: Callback parameters
            session: Current browser session

        Returns:
            Path to redirect to

        Raises:
            MissingClaimedIdError: If openid.claimed_id is missing
            InvalidAssertionError: If Steam rejects the assertion
            ProviderTransportError: On network failure
        """
        if not request.params.get("openid.claimed_id"):
            raise MissingClaimedIdError()

        steam = await self.auth_service.complete_steam_login(request.params)
        session.set_steam(steam)

        with logfire.span("steam_login", steam_id=steam.steam_id):
            await self.link_service.reconcile_if_complete(session.identity())

        return LINK_PAGE
