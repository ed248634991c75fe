"""Test configuration and fixtures."""

import pytest

from linker.domain.model import LinkRecord
from linker.domain.value import DiscordUser, SessionIdentity, SteamUser


def make_identity(
    discord_id: str | None = "111",
    steam_id: str | None = "76561198000000001",
    username: str = "alice",
    discriminator: str = "0001",
) -> SessionIdentity:
    """Build a session identity with the given halves present.

    Pass None for either id to leave that half out.
    """
    user = (
        DiscordUser(id=discord_id, username=username, discriminator=discriminator)
        if discord_id is not None
        else None
    )
    steam = SteamUser(steam_id=steam_id) if steam_id is not None else None
    return SessionIdentity(user=user, steam=steam)


def make_link(discord_id: str, steam_id: str, username: str = "alice#0001") -> LinkRecord:
    """Build a stored link record."""
    return LinkRecord(
        discord_id=discord_id, discord_username=username, steam_id=steam_id
    )


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep tests independent of the developer's environment and .env file."""
    for name in (
        "DISCORD_CLIENT_ID",
        "DISCORD_CLIENT_SECRET",
        "DISCORD_REDIRECT_URI",
        "STEAM_API_KEY",
        "BASE_URL",
        "PORT",
        "DEBUG",
        "SESSION_SECRET",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LINKS_FILE", str(tmp_path / "links.json"))
    monkeypatch.chdir(tmp_path)
