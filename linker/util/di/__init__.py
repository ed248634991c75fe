"""Dependency injection wiring."""

from collections.abc import Collection

from linker.util.di.application import ProdApplicationProvider
from linker.util.di.base import COMPONENTS, Component, ProviderBase
from linker.util.di.core import ProdConfigProvider
from linker.util.di.domain import ProdDomainProvider
from linker.util.di.infrastructure import (
    DiscordProvider,
    PersistenceProvider,
    ProdDiscordProvider,
    ProdPersistenceProvider,
    ProdSteamProvider,
    SteamProvider,
)

# One entry per provider in the container, concrete or component base
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    DiscordProvider,
    SteamProvider,
    PersistenceProvider,
]


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Mock implementations live in ``tests.di`` and are only visible once that
    package has been imported.

    Args:
        base: Concrete provider or component base
        use_mock: Whether to pick the mock implementation of a component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no such implementation
    """
    if base.__mock_component__ is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} provider for component '{base.__mock_component__}'")


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate every provider, swapping in mocks for ``mocked`` components."""
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "build_providers",
    "get_provider",
    "DiscordProvider",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDiscordProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProdSteamProvider",
    "SteamProvider",
]
