"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from linker.config import Settings
from linker.interface.api.error_handlers import register_error_handlers
from linker.interface.api.routes import auth, health, pages, session
from linker.util.di.container import create_container, setup_di
from linker.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    # Instrument httpx for outbound calls to Discord and Steam
    instrument_httpx()

    app_instance = FastAPI(
        title="Account Linker",
        description="Links a Discord account with a Steam account",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Signed cookie session holding the identity fragments
    app_instance.add_middleware(
        SessionMiddleware,
        secret_key=settings.session.secret,
        session_cookie=settings.session.cookie_name,
        max_age=settings.session.max_age,
        same_site="lax",
        https_only=settings.session.https_only,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(session.router)
    app_instance.include_router(pages.router)

    # Static pages last so they never shadow a route
    app_instance.mount(
        "/", StaticFiles(directory=settings.static_dir), name="static"
    )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
