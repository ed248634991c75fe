"""Steam OpenID 2.0 client implementation.

Steam only speaks OpenID 2.0 for sign-in. The relying party redirects with
``checkid_setup`` and, on return, re-posts the signed ``openid.*`` fields to
the provider with ``check_authentication`` to confirm them.
"""

from urllib.parse import urlencode

import httpx
import logfire

from linker.adapter.error import InvalidAssertionError, ProviderTransportError
from linker.domain.error import MissingClaimedIdError
from linker.domain.service.auth_service import OpenIDClient
from linker.domain.value.types import AuthProvider

OPENID_NS = "http://specs.openid.net/auth/2.0"
IDENTIFIER_SELECT = "http://specs.openid.net/auth/2.0/identifier_select"


class SteamOpenIDClient(OpenIDClient):
    """Base class for Steam OpenID clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealSteamOpenIDClient(SteamOpenIDClient):
    """Steam OpenID client with optional Web API profile lookup."""

    openid_url = "https://steamcommunity.com/openid/login"
    player_summaries_url = (
        "https://api.steampowered.com/ISteamUser/GetPlayerSummaries/v2/"
    )

    def __init__(self, return_to: str, realm: str, api_key: str | None = None) -> None:
        """Initialize Steam OpenID client.

        Args:
            return_to: Callback URL on this service
            realm: Base URL of this service
            api_key: Steam Web API key; persona lookup is skipped without it
        """
        self.return_to = return_to
        self.realm = realm
        self.api_key = api_key

    async def initiate_authorization(self) -> str:
        """Build the checkid_setup redirect URL."""
        params = {
            "openid.ns": OPENID_NS,
            "openid.mode": "checkid_setup",
            "openid.return_to": self.return_to,
            "openid.realm": self.realm,
            "openid.identity": IDENTIFIER_SELECT,
            "openid.claimed_id": IDENTIFIER_SELECT,
        }

        logfire.info("Steam OpenID authorization initiated", return_to=self.return_to)
        return f"{self.openid_url}?{urlencode(params)}"

    async def verify_assertion(self, params: dict[str, str]) -> str:
        """Confirm the assertion with Steam and extract the SteamID64.

        Args:
            params: Callback query parameters

        Returns:
            Last path segment of ``openid.claimed_id``

        Raises:
            MissingClaimedIdError: If ``openid.claimed_id`` is absent
            InvalidAssertionError: If Steam does not answer ``is_valid:true``
            ProviderTransportError: On network failure
        """
        claimed_id = params.get("openid.claimed_id")
        if not claimed_id:
            raise MissingClaimedIdError()

        verify_params = {
            key: ("check_authentication" if key == "openid.mode" else value)
            for key, value in params.items()
            if key.startswith("openid.")
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.openid_url,
                    data=verify_params,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            logfire.error("Steam assertion verification HTTP error", error=str(e))
            raise ProviderTransportError(
                AuthProvider.STEAM, f"Steam auth failed: {e}"
            ) from e

        if "is_valid:true" not in response.text:
            logfire.warn(
                "Steam assertion rejected",
                status_code=response.status_code,
                claimed_id=claimed_id,
            )
            raise InvalidAssertionError(AuthProvider.STEAM)

        return claimed_id.rstrip("/").split("/")[-1]

    async def fetch_persona_name(self, steam_id: str) -> str | None:
        """Look up the Steam persona name.

        Args:
            steam_id: SteamID64

        Returns:
            Persona name, or None without an API key or on any lookup failure
        """
        if not self.api_key:
            return None

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.player_summaries_url,
                    params={"key": self.api_key, "steamids": steam_id},
                    timeout=30.0,
                )
            if not response.is_success:
                logfire.warn(
                    "Steam player summary request failed",
                    status_code=response.status_code,
                    steam_id=steam_id,
                )
                return None
            players = response.json().get("response", {}).get("players")
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logfire.warn("Steam player summary lookup error", error=str(e))
            return None

        player = players[0] if isinstance(players, list) and players else None
        if isinstance(player, dict) and isinstance(player.get("personaname"), str):
            return player["personaname"] or None
        return None


class MockSteamOpenIDClient(SteamOpenIDClient):
    """Mock Steam OpenID client for testing.

    Accepts any assertion carrying a claimed_id, without network calls.
    """

    def __init__(self) -> None:
        pass

    async def initiate_authorization(self) -> str:
        """Return mock provider URL."""
        return "https://steamcommunity.com/openid/login?openid.mode=checkid_setup&mock=true"

    async def verify_assertion(self, params: dict[str, str]) -> str:
        """Return the last segment of the claimed_id."""
        claimed_id = params.get("openid.claimed_id")
        if not claimed_id:
            raise MissingClaimedIdError()
        return claimed_id.rstrip("/").split("/")[-1]

    async def fetch_persona_name(self, steam_id: str) -> str | None:
        """Return a deterministic persona name."""
        return f"mockplayer-{steam_id[-4:]}"
