"""Unit tests for GetLinkStatusUseCase."""

import pytest

from linker.application.session import LinkSession
from linker.application.usecase.link import GetLinkStatusUseCase
from linker.domain.value import DiscordUser, SteamUser
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_empty_session(unit_env):
    use_case = await unit_env.get(GetLinkStatusUseCase)

    status = await use_case.execute(LinkSession({}))

    assert status.steam is None
    assert status.discord is None


@pytest.mark.asyncio
async def test_reports_both_halves(unit_env):
    use_case = await unit_env.get(GetLinkStatusUseCase)
    session = LinkSession({})
    session.set_user(DiscordUser(id="111", username="alice", discriminator="0001"))
    session.set_steam(SteamUser(steam_id="76561198000000001", persona_name="Al"))

    status = await use_case.execute(session)

    assert status.model_dump(by_alias=True) == {
        "steam": {"steamId": "76561198000000001", "personaName": "Al"},
        "discord": {
            "id": "111",
            "username": "alice",
            "discriminator": "0001",
            "avatar": None,
        },
    }
