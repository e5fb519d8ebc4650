"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linkedout.config import Settings
from linkedout.interface.api.routes import health, votes
from linkedout.util.di.container import create_container, setup_di
from linkedout.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use (built from settings when omitted)

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="LinkedOut API",
        description="Vote submission and leaderboard API for the LinkedOut browser extension",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # The extension calls from LinkedIn pages, so origins come from settings
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins or ["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container(settings))

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)

    return app_instance
