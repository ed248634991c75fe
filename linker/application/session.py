"""Per-browser session context.

The cookie session middleware owns the underlying mapping; this wrapper is the
only code that knows its keys.
"""

from collections.abc import MutableMapping
from typing import Any

from linker.domain.value import DiscordUser, SessionIdentity, SteamUser

USER_KEY = "user"
STEAM_KEY = "steam"
RETURN_PATH_KEY = "after_discord_redirect"


class LinkSession:
    """Read/write access to the identity fragments of one browser session."""

    def __init__(self, data: MutableMapping[str, Any]) -> None:
        """Initialize session context.

        Args:
            data: Session mapping (``request.session`` in the API)
        """
        self._data = data

    @property
    def user(self) -> DiscordUser | None:
        raw = self._data.get(USER_KEY)
        return DiscordUser.model_validate(raw) if raw else None

    @property
    def steam(self) -> SteamUser | None:
        raw = self._data.get(STEAM_KEY)
        return SteamUser.model_validate(raw) if raw else None

    def set_user(self, user: DiscordUser) -> None:
        self._data[USER_KEY] = user.model_dump(by_alias=True, mode="json")

    def set_steam(self, steam: SteamUser) -> None:
        self._data[STEAM_KEY] = steam.model_dump(by_alias=True, mode="json")

    def remember_return_path(self, path: str) -> None:
        self._data[RETURN_PATH_KEY] = path

    def pop_return_path(self) -> str | None:
        """Take the remembered return path; it is only used once."""
        return self._data.pop(RETURN_PATH_KEY, None)

    def identity(self) -> SessionIdentity:
        return SessionIdentity(user=self.user, steam=self.steam)

    def destroy(self) -> None:
        """Drop every fragment and any pending return path."""
        self._data.clear()
