"""Complete Discord login use case."""

import logfire
from pydantic import BaseModel

from linker.application.session import LinkSession
from linker.domain.error import MissingCodeError
from linker.domain.service import AuthService, LinkService

DEFAULT_REDIRECT = "/home.html"


class CompleteDiscordLoginRequest(BaseModel):
    """Discord OAuth callback parameters."""

    code: str | None = None  # OAuth authorization code


class CompleteDiscordLoginUseCase:
    """Use case for finishing the Discord flow and reconciling the link."""

    def __init__(self, auth_service: AuthService, link_service: LinkService) -> None:
        """Initialize complete Discord login use case.

        Args:
            auth_service: Authentication domain service
            link_service: Link domain service
        """
        self.auth_service = auth_service
        self.link_service = link_service

    async def execute(
        self, request: CompleteDiscordLoginRequest, session: LinkSession
    ) -> str:
        """Execute Discord callback flow.

        Steps:
        1. Reject a callback without a code (no network call)
        2. Exchange the code and fetch the profile
        3. Store the profile in the session
        4. Reconcile the link if Steam is already known
        5. Consume the remembered return path

        Args:
            request: Callback parameters
            session: Current browser session

        Returns:
            Path to redirect to

        Raises:
            MissingCodeError: If the code is missing
            ProviderTransportError: If Discord rejects the exchange or profile fetch
        """
        if not request.code:
            raise MissingCodeError()

        user = await self.auth_service.complete_discord_login(request.code)
        session.set_user(user)

        with logfire.span("discord_login", discord_id=user.id):
            await self.link_service.reconcile_if_complete(session.identity())

        return session.pop_return_path() or DEFAULT_REDIRECT
