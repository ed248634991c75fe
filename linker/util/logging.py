"""Stdlib logging setup.

Routes and error handlers log through ``logging``; structured events go to
logfire (see ``linker.util.observability``).
"""

import logging
import sys

from linker.config import Settings

NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def resolve_level(settings: Settings) -> int:
    """Pick the root log level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure root logging to stdout.

    Args:
        settings: Application settings
    """
    level = resolve_level(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Access lines duplicate the FastAPI spans
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )
