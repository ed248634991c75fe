"""Domain value objects for the account linker.

The identity fragments below are what the session holds between the two
provider flows. They serialize to the same shape the browser sees from
``/api/me`` and ``/api/link-status``.
"""

from enum import Enum

from linker.domain.value.common import ValueObject


class AuthProvider(str, Enum):
    """External identity provider."""

    DISCORD = "discord"
    STEAM = "steam"


class DiscordUser(ValueObject):
    """Normalized Discord profile."""

    id: str
    username: str
    discriminator: str = "0"  # "0" for accounts migrated to unique usernames
    avatar: str | None = None

    @property
    def tag(self) -> str:
        """Display tag in ``username#discriminator`` form."""
        return f"{self.username}#{self.discriminator}"


class SteamUser(ValueObject):
    """Verified Steam identity."""

    steam_id: str  # SteamID64
    persona_name: str | None = None


class SessionIdentity(ValueObject):
    """Identity fragments collected in one browser session.

    Either half may be missing until the user has completed both flows.
    """

    user: DiscordUser | None = None
    steam: SteamUser | None = None

    @property
    def complete(self) -> bool:
        """Whether both fragments are present."""
        return self.user is not None and self.steam is not None
