"""Logfire setup and instrumentation.

Adapters and services log through ``logfire`` directly; this module only
configures the SDK and hooks it into FastAPI and httpx.
"""

from typing import Any

import logfire
from fastapi import FastAPI

from linker.config import Settings

# Endpoint parameters that must never end up in a span
REDACTED_PARAMS = frozenset({"code"})


def _send_to_logfire(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the linker service.

    Without ``OBSERVABILITY__LOGFIRE_TOKEN`` events only go to the console,
    unless ``OBSERVABILITY__SEND_TO_LOGFIRE`` says otherwise.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name="linker",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        discord_configured=settings.discord.configured,
    )


def scrub_request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Mask the OAuth authorization code in request spans."""
    values = attributes.get("values") or {}
    scrubbed = {
        key: "[redacted]" if key in REDACTED_PARAMS else value
        for key, value in values.items()
    }

    result = {**attributes, "values": scrubbed}
    if getattr(request, "url", None) is not None:
        result["path"] = request.url.path
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``.

    Headers are not captured: the cookie header carries the signed session.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=scrub_request_attributes,
    )


def instrument_httpx() -> None:
    """Trace outbound calls to Discord and Steam."""
    logfire.instrument_httpx()
