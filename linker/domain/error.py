"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when no Discord identity is present in the session.

    This is an expected state for anonymous visitors, not a failure.
    """

    def __init__(self) -> None:
        super().__init__("Not authenticated")


class ClientInputError(ValidationError):
    """A required request parameter is missing or malformed."""

    pass


class MissingCodeError(ClientInputError):
    """OAuth callback without an authorization code."""

    def __init__(self) -> None:
        super().__init__("Missing code parameter.")


class MissingClaimedIdError(ClientInputError):
    """OpenID callback without ``openid.claimed_id``."""

    def __init__(self) -> None:
        super().__init__("Missing claimed_id.")
