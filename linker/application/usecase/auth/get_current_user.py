"""Get current user use case."""

from linker.application.session import LinkSession
from linker.domain.error import UnauthenticatedError
from linker.domain.value import DiscordUser


class GetCurrentUserUseCase:
    """Use case for reading the Discord user held by the session."""

    async def execute(self, session: LinkSession) -> DiscordUser:
        """Return the Discord user of this session.

        Raises:
            UnauthenticatedError: If the Discord flow has not been completed
        """
        user = session.user
        if user is None:
            raise UnauthenticatedError()
        return user
