"""Link reconciliation domain service."""

import logfire

from linker.domain.model.link import LinkRecord
from linker.domain.repository.link import LinkRepository
from linker.domain.value import SessionIdentity


class LinkService:
    """Domain service that turns a complete session identity into a stored link."""

    def __init__(self, link_repository: LinkRepository) -> None:
        """Initialize link service.

        Args:
            link_repository: Link repository
        """
        self.link_repository = link_repository

    async def reconcile_if_complete(
        self, identity: SessionIdentity
    ) -> LinkRecord | None:
        """Upsert the pairing held by ``identity`` once both halves are known.

        The first stored record sharing either the Discord id or the Steam id
        is overwritten in place; otherwise the candidate is appended. When the
        two ids match two different records only the first one is updated.

        Args:
            identity: Session identity fragments

        Returns:
            The stored record, or None if the identity is incomplete
        """
        if identity.user is None or identity.steam is None:
            return None

        candidate = LinkRecord(
            discord_id=identity.user.id,
            discord_username=identity.user.tag,
            steam_id=identity.steam.steam_id,
        )

        with logfire.span(
            "link_service.reconcile",
            discord_id=candidate.discord_id,
            steam_id=candidate.steam_id,
        ):
            async with self.link_repository.lock:
                links = await self.link_repository.load()

                index = next(
                    (i for i, link in enumerate(links) if link.matches(candidate)),
                    None,
                )
                if index is not None:
                    links[index] = candidate
                else:
                    links.append(candidate)

                await self.link_repository.save(links)

            logfire.info(
                "Link updated" if index is not None else "Link created",
                discord_id=candidate.discord_id,
                steam_id=candidate.steam_id,
                total=len(links),
            )
            return candidate
