"""Discord OAuth 2.0 client implementation.

Implements the authorization-code flow with the ``identify`` scope.
"""

from urllib.parse import urlencode

import httpx
import logfire

from linker.adapter.error import (
    ProviderExchangeError,
    ProviderProfileFetchError,
    ProviderTransportError,
)
from linker.domain.service.auth_service import OAuthClient
from linker.domain.value.types import AuthProvider, DiscordUser
from linker.util.error import ConfigurationError


def _unexpected_body(part: str, error: Exception) -> ProviderTransportError:
    logfire.error("Discord returned an unusable response", part=part, error=repr(error))
    return ProviderTransportError(AuthProvider.DISCORD, f"Unexpected error: {error}")


class DiscordOAuthClient(OAuthClient):
    """Base class for Discord OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealDiscordOAuthClient(DiscordOAuthClient):
    """Discord OAuth 2.0 client."""

    authorize_url = "https://discord.com/api/oauth2/authorize"
    token_url = "https://discord.com/api/oauth2/token"
    user_info_url = "https://discord.com/api/users/@me"

    def __init__(
        self,
        client_id: str | None,
        client_secret: str | None,
        redirect_uri: str,
    ) -> None:
        """Initialize Discord OAuth client.

        Missing credentials are only reported when a flow is started, so the
        rest of the service keeps working without Discord configured.

        Args:
            client_id: Discord application client ID
            client_secret: Discord application client secret
            redirect_uri: Callback URL registered with Discord
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

    def _require_credentials(self) -> None:
        missing = tuple(
            name
            for name, value in (
                ("DISCORD_CLIENT_ID", self.client_id),
                ("DISCORD_CLIENT_SECRET", self.client_secret),
            )
            if not value
        )
        if missing:
            raise ConfigurationError(
                "Discord OAuth is not configured. Set environment variables first.",
                missing=missing,
            )

    async def initiate_authorization(self) -> str:
        """Build the Discord authorization URL.

        Returns:
            Authorization URL to redirect user to

        Raises:
            ConfigurationError: If client credentials are missing
        """
        self._require_credentials()

        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": "identify",
        }
        auth_url = f"{self.authorize_url}?{urlencode(params)}"

        logfire.info(
            "Discord OAuth authorization initiated", redirect_uri=self.redirect_uri
        )
        return auth_url

    async def complete_authorization(self, code: str) -> DiscordUser:
        """Complete Discord OAuth authorization flow.

        Args:
            code: Authorization code from Discord callback

        Returns:
            Normalized Discord profile

        Raises:
            ConfigurationError: If client credentials are missing
            ProviderExchangeError: If the code exchange is rejected
            ProviderProfileFetchError: If the profile request is rejected
            ProviderTransportError: On network failure or an unusable response body
        """
        self._require_credentials()

        access_token = await self._exchange_code_for_token(code)
        user = await self._get_user_info(access_token)

        logfire.info("Discord OAuth completed", user_id=user.id, username=user.username)
        return user

    async def _exchange_code_for_token(self, code: str) -> str:
        """Exchange authorization code for access token.

        Args:
            code: Authorization code from callback

        Returns:
            Access token
        """
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            logfire.error("Discord token exchange HTTP error", error=str(e))
            raise ProviderTransportError(
                AuthProvider.DISCORD, f"Unexpected error: {e}"
            ) from e

        if not response.is_success:
            logfire.error(
                "Discord token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderExchangeError(AuthProvider.DISCORD, response.text)

        try:
            return response.json()["access_token"]
        except (ValueError, KeyError, TypeError) as e:
            raise _unexpected_body("token", e) from e

    async def _get_user_info(self, access_token: str) -> DiscordUser:
        """Get the authenticated user from the Discord API.

        Args:
            access_token: OAuth access token

        Returns:
            Normalized Discord profile
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            logfire.error("Discord user info HTTP error", error=str(e))
            raise ProviderTransportError(
                AuthProvider.DISCORD, f"Unexpected error: {e}"
            ) from e

        if not response.is_success:
            logfire.error(
                "Discord user info request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderProfileFetchError(AuthProvider.DISCORD, response.text)

        try:
            user_info = response.json()
            return DiscordUser(
                id=user_info["id"],
                username=user_info["username"],
                discriminator=user_info.get("discriminator") or "0",
                avatar=user_info.get("avatar"),
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise _unexpected_body("profile", e) from e


class MockDiscordOAuthClient(DiscordOAuthClient):
    """Mock Discord OAuth client for testing.

    Returns deterministic test data without making real API calls.
    """

    def __init__(self) -> None:
        self.completed_codes: list[str] = []

    async def initiate_authorization(self) -> str:
        """Return mock authorization URL."""
        return "https://discord.com/api/oauth2/authorize?scope=identify&mock=true"

    async def complete_authorization(self, code: str) -> DiscordUser:
        """Return mock user information.

        Args:
            code: Authorization code (recorded, otherwise unused)

        Returns:
            Mock Discord profile
        """
        self.completed_codes.append(code)
        return DiscordUser(
            id="80351110224678912",
            username="mockuser",
            discriminator="1337",
            avatar="8342729096ea3675442027381ff50dfe",
        )
