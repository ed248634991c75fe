"""Discord component providers."""

from dishka import Scope, provide

from linker.adapter.discord.client import DiscordOAuthClient, RealDiscordOAuthClient
from linker.config import DiscordOAuthSettings
from linker.util.di.base import ProviderBase


class DiscordProvider(ProviderBase):
    """Provides the ``DiscordOAuthClient``."""

    __mock_component__ = "discord"


class ProdDiscordProvider(DiscordProvider):
    """Real Discord OAuth client."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_discord_oauth_client(
        self, discord: DiscordOAuthSettings
    ) -> DiscordOAuthClient:
        """Provide Discord OAuth client.

        Credentials are checked when a flow starts, not here, so an
        unconfigured deployment still serves Steam login and static pages.
        """
        return RealDiscordOAuthClient(
            client_id=discord.client_id,
            client_secret=discord.client_secret,
            redirect_uri=discord.redirect_uri,
        )
