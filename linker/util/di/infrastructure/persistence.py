"""Persistence component providers."""

import logfire
from dishka import Scope, provide

from linker.config import StorageSettings
from linker.domain.repository import LinkRepository
from linker.persistence.repository import JsonFileLinkRepository
from linker.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Provides the ``LinkRepository``."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """JSON file link store."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_link_repository(self, storage: StorageSettings) -> LinkRepository:
        """Provide the link repository.

        APP-scoped: one instance, and therefore one write lock, per process.
        """
        logfire.info("Link store configured", path=str(storage.links_file))
        return JsonFileLinkRepository(storage.links_file)
