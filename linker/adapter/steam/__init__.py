"""Steam OpenID adapter."""

from .client import (
    MockSteamOpenIDClient,
    RealSteamOpenIDClient,
    SteamOpenIDClient,
)

__all__ = ["SteamOpenIDClient", "RealSteamOpenIDClient", "MockSteamOpenIDClient"]
