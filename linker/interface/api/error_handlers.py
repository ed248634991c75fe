"""Exception handlers mapping errors to plain-text responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from linker.adapter.error import ProviderTransportError, VerificationFailure
from linker.domain.error import ClientInputError
from linker.util.error import ConfigurationError

logger = logging.getLogger(__name__)


async def configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> PlainTextResponse:
    logger.error(
        f"Configuration error on {request.url.path}: {exc} "
        f"(missing: {', '.join(exc.missing) or 'unknown'})"
    )
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def client_input_error_handler(
    request: Request, exc: ClientInputError
) -> PlainTextResponse:
    logger.info(f"Rejected request to {request.url.path}: {exc}")
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def provider_transport_error_handler(
    request: Request, exc: ProviderTransportError
) -> PlainTextResponse:
    logger.error(f"{exc.provider.value} provider error on {request.url.path}: {exc}")
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def verification_failure_handler(
    request: Request, exc: VerificationFailure
) -> PlainTextResponse:
    logger.warning(f"{exc.provider.value} assertion rejected on {request.url.path}")
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the application."""
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(ClientInputError, client_input_error_handler)
    app.add_exception_handler(ProviderTransportError, provider_transport_error_handler)
    app.add_exception_handler(VerificationFailure, verification_failure_handler)
