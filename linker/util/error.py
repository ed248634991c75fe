"""Errors raised by configuration and wiring code."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A feature was used without the settings it needs.

    Attributes:
        missing: Names of the unset environment variables
    """

    def __init__(self, message: str, missing: tuple[str, ...] = ()) -> None:
        self.missing = missing
        super().__init__(message)
