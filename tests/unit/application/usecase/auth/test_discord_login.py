"""Unit tests for the Discord login use cases."""

from unittest.mock import patch

import pytest

from linker.adapter.discord.client import DiscordOAuthClient
from linker.application.session import RETURN_PATH_KEY, LinkSession
from linker.application.usecase.auth import (
    BeginDiscordLoginRequest,
    BeginDiscordLoginUseCase,
    CompleteDiscordLoginRequest,
    CompleteDiscordLoginUseCase,
)
from linker.domain.error import MissingCodeError
from linker.domain.repository import LinkRepository
from linker.domain.value import SteamUser
from linker.util.error import ConfigurationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()
unconfigured_env = create_env_fixture(unmock={"discord"})


class TestBeginDiscordLogin:
    """Tests for BeginDiscordLoginUseCase."""

    @pytest.mark.asyncio
    async def test_returns_authorization_url(self, unit_env):
        """Should return the provider URL without touching the session."""
        use_case = await unit_env.get(BeginDiscordLoginUseCase)
        data = {}

        url = await use_case.execute(BeginDiscordLoginRequest(), LinkSession(data))

        assert url.startswith("https://discord.com/api/oauth2/authorize")
        assert data == {}

    @pytest.mark.asyncio
    async def test_remembers_local_return_path(self, unit_env):
        """Should keep a local path for after the callback."""
        use_case = await unit_env.get(BeginDiscordLoginUseCase)
        data = {}

        await use_case.execute(
            BeginDiscordLoginRequest(return_path="/link.html"), LinkSession(data)
        )

        assert data[RETURN_PATH_KEY] == "/link.html"

    @pytest.mark.parametrize(
        "return_path",
        [
            "https://evil.example.com/",
            "//evil.example.com/path",
            "/\\evil.example.com",
            "link.html",
        ],
    )
    @pytest.mark.asyncio
    async def test_ignores_non_local_return_path(self, unit_env, return_path):
        """Should not remember paths that leave the site."""
        use_case = await unit_env.get(BeginDiscordLoginUseCase)
        data = {}

        await use_case.execute(
            BeginDiscordLoginRequest(return_path=return_path), LinkSession(data)
        )

        assert RETURN_PATH_KEY not in data

    @pytest.mark.asyncio
    async def test_unconfigured_discord_raises(self, unconfigured_env):
        """Should fail before remembering anything when credentials are missing."""
        use_case = await unconfigured_env.get(BeginDiscordLoginUseCase)
        data = {}

        with pytest.raises(ConfigurationError, match="not configured"):
            await use_case.execute(
                BeginDiscordLoginRequest(return_path="/link.html"), LinkSession(data)
            )

        assert data == {}


class TestCompleteDiscordLogin:
    """Tests for CompleteDiscordLoginUseCase."""

    @pytest.mark.parametrize("code", [None, ""])
    @pytest.mark.asyncio
    async def test_missing_code_raises_without_exchange(self, unit_env, code):
        """Should reject the callback before calling Discord."""
        use_case = await unit_env.get(CompleteDiscordLoginUseCase)
        client = await unit_env.get(DiscordOAuthClient)
        data = {}

        with pytest.raises(MissingCodeError, match="Missing code parameter."):
            await use_case.execute(CompleteDiscordLoginRequest(code=code), LinkSession(data))

        assert client.completed_codes == []
        assert data == {}

    @pytest.mark.asyncio
    async def test_stores_user_and_redirects_home(self, unit_env):
        """Should put the Discord user in the session."""
        use_case = await unit_env.get(CompleteDiscordLoginUseCase)
        client = await unit_env.get(DiscordOAuthClient)
        session = LinkSession({})

        redirect = await use_case.execute(
            CompleteDiscordLoginRequest(code="abc123"), session
        )

        assert redirect == "/home.html"
        assert client.completed_codes == ["abc123"]
        assert session.user.id == "80351110224678912"
        assert session.user.tag == "mockuser#1337"

    @pytest.mark.asyncio
    async def test_return_path_is_used_once(self, unit_env):
        """Should redirect to the remembered path and then forget it."""
        use_case = await unit_env.get(CompleteDiscordLoginUseCase)
        data = {RETURN_PATH_KEY: "/link.html"}
        session = LinkSession(data)

        first = await use_case.execute(CompleteDiscordLoginRequest(code="a"), session)
        second = await use_case.execute(CompleteDiscordLoginRequest(code="b"), session)

        assert first == "/link.html"
        assert second == "/home.html"
        assert RETURN_PATH_KEY not in data

    @pytest.mark.asyncio
    async def test_without_steam_does_not_save(self, unit_env):
        """Should leave the store alone until both halves are known."""
        use_case = await unit_env.get(CompleteDiscordLoginUseCase)
        repository = await unit_env.get(LinkRepository)

        await use_case.execute(CompleteDiscordLoginRequest(code="abc"), LinkSession({}))

        assert await repository.load() == []
        assert repository.save_count == 0

    @pytest.mark.asyncio
    async def test_with_steam_creates_link(self, unit_env):
        """Should link the new Discord user with the session's Steam id."""
        use_case = await unit_env.get(CompleteDiscordLoginUseCase)
        repository = await unit_env.get(LinkRepository)
        session = LinkSession({})
        session.set_steam(SteamUser(steam_id="76561198000000042"))

        await use_case.execute(CompleteDiscordLoginRequest(code="abc"), session)

        links = await repository.load()
        assert len(links) == 1
        assert links[0].discord_id == "80351110224678912"
        assert links[0].discord_username == "mockuser#1337"
        assert links[0].steam_id == "76561198000000042"

    @pytest.mark.asyncio
    async def test_exchange_failure_leaves_session_untouched(self, unit_env):
        """Should not store anything when Discord fails."""
        use_case = await unit_env.get(CompleteDiscordLoginUseCase)
        client = await unit_env.get(DiscordOAuthClient)
        data = {}

        with patch.object(
            client, "complete_authorization", side_effect=RuntimeError("boom")
        ):
            with pytest.raises(RuntimeError):
                await use_case.execute(
                    CompleteDiscordLoginRequest(code="abc"), LinkSession(data)
                )

        assert data == {}
