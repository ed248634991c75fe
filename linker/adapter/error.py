"""Infrastructure layer errors."""

from linker.domain.value import AuthProvider


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    def __init__(self, provider: AuthProvider, message: str) -> None:
        self.provider = provider
        super().__init__(message)


class ProviderTransportError(ProviderError):
    """Network or HTTP failure talking to a provider."""

    pass


class ProviderExchangeError(ProviderTransportError):
    """Authorization code exchange rejected by the provider."""

    def __init__(self, provider: AuthProvider, body: str) -> None:
        self.body = body
        super().__init__(provider, f"Failed to exchange code: {body}")


class ProviderProfileFetchError(ProviderTransportError):
    """Authenticated profile request rejected by the provider."""

    def __init__(self, provider: AuthProvider, body: str) -> None:
        self.body = body
        super().__init__(provider, f"Failed to fetch user: {body}")


class VerificationFailure(ProviderError):
    """Identity assertion rejected."""

    pass


class InvalidAssertionError(VerificationFailure):
    """OpenID check_authentication did not confirm the assertion."""

    def __init__(self, provider: AuthProvider) -> None:
        super().__init__(provider, "Invalid Steam login.")
