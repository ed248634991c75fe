"""Repository interfaces for the account linker.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from linker.domain.repository.link import LinkRepository

__all__ = [
    "LinkRepository",
]
