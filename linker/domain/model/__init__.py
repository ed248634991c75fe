"""Domain model entities for the account linker."""

from linker.domain.model.link import LinkRecord

__all__ = [
    "LinkRecord",
]
