"""Begin Discord login use case."""

import logfire
from pydantic import BaseModel

from linker.application.session import LinkSession
from linker.domain.service import AuthService
from linker.domain.value import AuthProvider


class BeginDiscordLoginRequest(BaseModel):
    """Begin Discord login request."""

    return_path: str | None = None  # Where to land after the callback


class BeginDiscordLoginUseCase:
    """Use case for redirecting the browser to Discord."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize begin Discord login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(
        self, request: BeginDiscordLoginRequest, session: LinkSession
    ) -> str:
        """Build the authorization URL and remember the return path.

        Only local paths are remembered, anything else falls back to the
        default landing page after the callback.

        Args:
            request: Request with optional return path
            session: Current browser session

        Returns:
            Discord authorization URL

        Raises:
            ConfigurationError: If Discord credentials are not configured
        """
        auth_url = await self.auth_service.initiate_login(AuthProvider.DISCORD)

        if request.return_path:
            if _is_local_path(request.return_path):
                session.remember_return_path(request.return_path)
            else:
                logfire.warn(
                    "Ignoring non-local return path", return_path=request.return_path
                )

        return auth_url


def _is_local_path(path: str) -> bool:
    return path.startswith("/") and not path.startswith("//") and "\\" not in path
