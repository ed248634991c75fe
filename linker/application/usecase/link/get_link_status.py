"""Get link status use case."""

from pydantic import BaseModel

from linker.application.session import LinkSession
from linker.domain.value import DiscordUser, SteamUser


class GetLinkStatusResponse(BaseModel):
    """Identity fragments collected so far; either may be null."""

    steam: SteamUser | None
    discord: DiscordUser | None


class GetLinkStatusUseCase:
    """Use case for reporting which halves of the link are present."""

    async def execute(self, session: LinkSession) -> GetLinkStatusResponse:
        """Read both fragments from the session."""
        return GetLinkStatusResponse(steam=session.steam, discord=session.user)
