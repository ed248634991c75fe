"""Configuration provider."""

from dishka import Scope, provide

from linker.config import (
    DiscordOAuthSettings,
    Settings,
    SteamOpenIDSettings,
    StorageSettings,
)
from linker.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings, plus the group each component depends on.

    Settings are read once per container, on first use.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_discord_settings(self, settings: Settings) -> DiscordOAuthSettings:
        return settings.discord

    @provide
    def provide_steam_settings(self, settings: Settings) -> SteamOpenIDSettings:
        return settings.steam

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        return settings.storage
