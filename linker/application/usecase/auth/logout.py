"""Logout use case."""

import logfire

from linker.application.session import LinkSession

LOGOUT_REDIRECT = "/home.html"


class LogoutUseCase:
    """Use case for discarding the browser session."""

    async def execute(self, session: LinkSession) -> str:
        """Destroy the session and return the landing page.

        Destroying is best effort: a failure is logged and the user is still
        sent to the landing page.

        Args:
            session: Current browser session

        Returns:
            Path to redirect to
        """
        try:
            session.destroy()
        except Exception as e:
            logfire.error("Session destroy failed", error=str(e))
        return LOGOUT_REDIRECT
