"""Request-level dependencies shared by the routes."""

from fastapi import Request

from linker.application.session import LinkSession


def get_link_session(request: Request) -> LinkSession:
    """Wrap the cookie session of this request."""
    return LinkSession(request.session)
