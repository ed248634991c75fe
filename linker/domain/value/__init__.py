"""Domain value objects for the account linker."""

from linker.domain.value.types import (
    AuthProvider,
    DiscordUser,
    SessionIdentity,
    SteamUser,
)

__all__ = [
    "AuthProvider",
    "DiscordUser",
    "SessionIdentity",
    "SteamUser",
]
