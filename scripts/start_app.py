#!/usr/bin/env python3
"""Run the account linker under uvicorn.

Logging and Logfire are configured before the app module is imported, so
import-time failures (bad settings, missing static files) are reported too.
"""

import sys

import logfire
import uvicorn

from linker.config import Settings
from linker.util.logging import setup_logging
from linker.util.observability import configure_logfire

APP = "linker.interface.api.app:app"


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    if settings.environment == "production" and settings.session_secret == "change-this-secret":
        logfire.warn("SESSION_SECRET is the default value; sessions can be forged")

    logfire.info(
        "Starting account linker",
        base_url=settings.base_url,
        links_file=str(settings.storage.links_file),
        discord_configured=settings.discord.configured,
    )

    try:
        uvicorn.run(
            APP,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
    except Exception as e:
        logfire.exception("Account linker failed", error_type=type(e).__name__)
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
