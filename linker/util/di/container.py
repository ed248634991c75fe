"""Production container and FastAPI integration."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from linker.util.di import build_providers


def create_container() -> AsyncContainer:
    """Build the production container, with no component mocked."""
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` so ``FromDishka`` parameters resolve per request."""
    setup_dishka(container=container, app=app)
