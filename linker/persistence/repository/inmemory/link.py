"""In-memory link repository for testing."""

from linker.domain.model.link import LinkRecord
from linker.domain.repository.link import LinkRepository


class InMemoryLinkRepository(LinkRepository):
    """In-memory implementation of LinkRepository for testing."""

    def __init__(self, links: list[LinkRecord] | None = None) -> None:
        super().__init__()
        self._links: list[LinkRecord] = list(links or [])
        self.save_count = 0

    async def load(self) -> list[LinkRecord]:
        """Return a copy of the stored collection."""
        return list(self._links)

    async def save(self, links: list[LinkRecord]) -> None:
        """Replace the stored collection."""
        self._links = list(links)
        self.save_count += 1
