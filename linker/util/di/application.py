"""Application layer DI providers."""

from dishka import Scope, provide

from linker.application.usecase.auth import (
    BeginDiscordLoginUseCase,
    BeginSteamLoginUseCase,
    CompleteDiscordLoginUseCase,
    CompleteSteamLoginUseCase,
    GetCurrentUserUseCase,
    LogoutUseCase,
)
from linker.application.usecase.link import GetLinkStatusUseCase
from linker.domain.service import AuthService, LinkService
from linker.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_begin_discord_login_use_case(
        self, auth_service: AuthService
    ) -> BeginDiscordLoginUseCase:
        """Provide begin Discord login use case."""
        return BeginDiscordLoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_complete_discord_login_use_case(
        self, auth_service: AuthService, link_service: LinkService
    ) -> CompleteDiscordLoginUseCase:
        """Provide complete Discord login use case."""
        return CompleteDiscordLoginUseCase(
            auth_service=auth_service, link_service=link_service
        )

    @provide(scope=Scope.REQUEST)
    def get_begin_steam_login_use_case(
        self, auth_service: AuthService
    ) -> BeginSteamLoginUseCase:
        """Provide begin Steam login use case."""
        return BeginSteamLoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_complete_steam_login_use_case(
        self, auth_service: AuthService, link_service: LinkService
    ) -> CompleteSteamLoginUseCase:
        """Provide complete Steam login use case."""
        return CompleteSteamLoginUseCase(
            auth_service=auth_service, link_service=link_service
        )

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase()

    # Session read use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase()

    @provide(scope=Scope.REQUEST)
    def get_link_status_use_case(self) -> GetLinkStatusUseCase:
        """Provide get link status use case."""
        return GetLinkStatusUseCase()
