"""Domain layer DI providers."""

from dishka import Scope, provide

from linker.adapter.discord.client import DiscordOAuthClient
from linker.adapter.steam.client import SteamOpenIDClient
from linker.domain.repository import LinkRepository
from linker.domain.service import AuthService, LinkService
from linker.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped; the repository they share is APP-scoped so
    its lock serializes writes across requests.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self,
        discord_client: DiscordOAuthClient,
        steam_client: SteamOpenIDClient,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(discord_client=discord_client, steam_client=steam_client)

    @provide
    def get_link_service(self, link_repository: LinkRepository) -> LinkService:
        """Provide link domain service."""
        return LinkService(link_repository=link_repository)
