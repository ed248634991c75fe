"""Authentication use cases."""

from .begin_discord_login import BeginDiscordLoginRequest, BeginDiscordLoginUseCase
from .begin_steam_login import BeginSteamLoginUseCase
from .complete_discord_login import (
    CompleteDiscordLoginRequest,
    CompleteDiscordLoginUseCase,
)
from .complete_steam_login import CompleteSteamLoginRequest, CompleteSteamLoginUseCase
from .get_current_user import GetCurrentUserUseCase
from .logout import LogoutUseCase

__all__ = [
    "BeginDiscordLoginRequest",
    "BeginDiscordLoginUseCase",
    "BeginSteamLoginUseCase",
    "CompleteDiscordLoginRequest",
    "CompleteDiscordLoginUseCase",
    "CompleteSteamLoginRequest",
    "CompleteSteamLoginUseCase",
    "GetCurrentUserUseCase",
    "LogoutUseCase",
]
