"""Unit tests for logout and current-user use cases."""

from unittest.mock import MagicMock

import pytest

from linker.application.session import LinkSession
from linker.application.usecase.auth import GetCurrentUserUseCase, LogoutUseCase
from linker.domain.error import UnauthenticatedError
from linker.domain.value import DiscordUser, SteamUser
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCurrentUser:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_returns_session_user(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        session = LinkSession({})
        session.set_user(DiscordUser(id="111", username="alice", discriminator="0001"))

        user = await use_case.execute(session)

        assert user.id == "111"
        assert user.tag == "alice#0001"

    @pytest.mark.asyncio
    async def test_steam_only_session_is_unauthenticated(self, unit_env):
        """Should only count the Discord half as logged in."""
        use_case = await unit_env.get(GetCurrentUserUseCase)
        session = LinkSession({})
        session.set_steam(SteamUser(steam_id="76561198000000001"))

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(session)


class TestLogout:
    """Tests for LogoutUseCase."""

    @pytest.mark.asyncio
    async def test_clears_everything(self, unit_env):
        use_case = await unit_env.get(LogoutUseCase)
        data = {"after_discord_redirect": "/link.html"}
        session = LinkSession(data)
        session.set_user(DiscordUser(id="111", username="alice"))
        session.set_steam(SteamUser(steam_id="76561198000000001"))

        redirect = await use_case.execute(session)

        assert redirect == "/home.html"
        assert data == {}

    @pytest.mark.asyncio
    async def test_destroy_failure_still_redirects(self, unit_env):
        """Should log and carry on when the session cannot be destroyed."""
        use_case = await unit_env.get(LogoutUseCase)
        data = MagicMock()
        data.clear.side_effect = RuntimeError("store down")

        redirect = await use_case.execute(LinkSession(data))

        assert redirect == "/home.html"
        data.clear.assert_called_once()
