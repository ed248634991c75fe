"""Authentication domain service."""

import logfire

from linker.domain.value.types import AuthProvider, DiscordUser, SteamUser


class OAuthClient:
    """OAuth 2.0 authorization-code client interface (Discord)."""

    async def initiate_authorization(self) -> str:
        """Build the provider authorization URL.

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str) -> DiscordUser:
        """Exchange the authorization code and fetch the profile.

        Args:
            code: Authorization code from OAuth callback

        Returns:
            Normalized provider profile
        """
        raise NotImplementedError


class OpenIDClient:
    """OpenID 2.0 relying-party client interface (Steam)."""

    async def initiate_authorization(self) -> str:
        """Build the checkid_setup redirect URL.

        Returns:
            Provider URL to redirect user to
        """
        raise NotImplementedError

    async def verify_assertion(self, params: dict[str, str]) -> str:
        """Verify a positive assertion with the provider.

        Args:
            params: Callback query parameters

        Returns:
            Identifier taken from the verified claimed_id
        """
        raise NotImplementedError

    async def fetch_persona_name(self, steam_id: str) -> str | None:
        """Look up a display name, if the provider supports it.

        Args:
            steam_id: Verified identifier

        Returns:
            Display name, or None when unavailable
        """
        raise NotImplementedError


class AuthService:
    """Domain service coordinating both identity providers."""

    def __init__(self, discord_client: OAuthClient, steam_client: OpenIDClient) -> None:
        """Initialize auth service.

        Args:
            discord_client: Discord OAuth 2.0 client
            steam_client: Steam OpenID client
        """
        self.discord_client = discord_client
        self.steam_client = steam_client

    async def initiate_login(self, provider: AuthProvider) -> str:
        """Get the authorization URL for a provider.

        Args:
            provider: Provider to log in with

        Returns:
            URL to redirect user to
        """
        if provider == AuthProvider.DISCORD:
            return await self.discord_client.initiate_authorization()
        return await self.steam_client.initiate_authorization()

    async def complete_discord_login(self, code: str) -> DiscordUser:
        """Complete the Discord authorization-code flow.

        Args:
            code: Authorization code from callback

        Returns:
            Normalized Discord profile
        """
        return await self.discord_client.complete_authorization(code)

    async def complete_steam_login(self, params: dict[str, str]) -> SteamUser:
        """Verify a Steam assertion and enrich it with the persona name.

        A missing persona name is not an error.

        Args:
            params: Callback query parameters

        Returns:
            Verified Steam identity
        """
        steam_id = await self.steam_client.verify_assertion(params)
        persona_name = await self.steam_client.fetch_persona_name(steam_id)

        logfire.info(
            "Steam login verified",
            steam_id=steam_id,
            has_persona_name=persona_name is not None,
        )
        return SteamUser(steam_id=steam_id, persona_name=persona_name)
