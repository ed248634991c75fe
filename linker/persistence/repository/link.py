"""JSON file implementation of LinkRepository."""

import asyncio
import json
from pathlib import Path

import logfire
from pydantic import TypeAdapter, ValidationError

from linker.domain.model.link import LinkRecord
from linker.domain.repository.link import LinkRepository

_links_adapter = TypeAdapter(list[LinkRecord])


class JsonFileLinkRepository(LinkRepository):
    """Stores the link collection as one pretty-printed JSON array.

    Every save rewrites the whole file. There is no partial-write protection:
    a crash mid-write leaves a truncated file, which the next load treats as
    an empty store.
    """

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = Path(path)

    async def load(self) -> list[LinkRecord]:
        """Load links from disk, or an empty list if unreadable."""
        return await asyncio.to_thread(self._read)

    async def save(self, links: list[LinkRecord]) -> None:
        """Overwrite the file with the full collection."""
        await asyncio.to_thread(self._write, links)
        logfire.info("Links saved", path=str(self.path), count=len(links))

    def _read(self) -> list[LinkRecord]:
        try:
            data = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            logfire.warn("Link store unreadable", path=str(self.path), error=str(e))
            return []

        try:
            return _links_adapter.validate_json(data)
        except ValidationError as e:
            logfire.warn(
                "Link store malformed, treating as empty",
                path=str(self.path),
                error=str(e),
            )
            return []

    def _write(self, links: list[LinkRecord]) -> None:
        payload = [link.model_dump(by_alias=True) for link in links]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
