"""In-memory repository implementations for testing."""

from .link import InMemoryLinkRepository

__all__ = [
    "InMemoryLinkRepository",
]
