"""Domain services."""

from .auth_service import AuthService, OAuthClient, OpenIDClient
from .link_service import LinkService

__all__ = [
    "AuthService",
    "LinkService",
    "OAuthClient",
    "OpenIDClient",
]
