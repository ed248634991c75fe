"""Link repository interface."""

import asyncio
from abc import ABC, abstractmethod

from linker.domain.model.link import LinkRecord


class LinkRepository(ABC):
    """Repository for the link collection.

    The whole collection is read and written at once. Callers that
    read-modify-write must hold ``lock`` for the full cycle.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    @property
    def lock(self) -> asyncio.Lock:
        """Single-writer lock shared by every user of this repository."""
        return self._lock

    @abstractmethod
    async def load(self) -> list[LinkRecord]:
        """Load the full collection.

        Returns:
            Records in insertion order; empty if the store is missing or unreadable
        """
        pass

    @abstractmethod
    async def save(self, links: list[LinkRecord]) -> None:
        """Replace the stored collection.

        Args:
            links: The complete collection to persist
        """
        pass
