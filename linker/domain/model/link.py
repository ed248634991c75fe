"""Link record entity.

Pairs one Discord account with one Steam account.
"""

from linker.domain.model.common import DomainModel


class LinkRecord(DomainModel):
    """Confirmed pairing of a Discord account and a Steam account.

    Stored with camelCase keys (``discordId``, ``discordUsername``,
    ``steamId``); always dump with ``by_alias=True``.
    """

    discord_id: str
    discord_username: str  # "name#discriminator"
    steam_id: str

    def matches(self, other: "LinkRecord") -> bool:
        """Whether either side of the pairing is shared with ``other``."""
        return self.discord_id == other.discord_id or self.steam_id == other.steam_id
