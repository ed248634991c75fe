"""Mock providers for testing."""

from .discord import MockDiscordProvider
from .persistence import MockPersistenceProvider
from .steam import MockSteamProvider
from .container import build_test_container

__all__ = [
    "MockDiscordProvider",
    "MockPersistenceProvider",
    "MockSteamProvider",
    "build_test_container",
]
