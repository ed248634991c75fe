"""Swappable component providers.

The production implementations are imported here so that
``__subclasses__()`` of each base finds them.
"""

from .discord import DiscordProvider, ProdDiscordProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider
from .steam import ProdSteamProvider, SteamProvider

__all__ = [
    "DiscordProvider",
    "PersistenceProvider",
    "ProdDiscordProvider",
    "ProdPersistenceProvider",
    "ProdSteamProvider",
    "SteamProvider",
]
