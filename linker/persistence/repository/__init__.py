"""Repository implementations."""

from .link import JsonFileLinkRepository

__all__ = [
    "JsonFileLinkRepository",
]
