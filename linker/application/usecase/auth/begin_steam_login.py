"""Begin Steam login use case."""

from linker.domain.service import AuthService
from linker.domain.value import AuthProvider


class BeginSteamLoginUseCase:
    """Use case for redirecting the browser to Steam."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self) -> str:
        """Build the OpenID checkid_setup URL."""
        return await self.auth_service.initiate_login(AuthProvider.STEAM)
