"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from linkedout.config import Settings
from linkedout.util.di import PROVIDERS, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container.

    The persistence component follows ``settings.storage.backend``: PostgreSQL
    by default, in-process stores when set to ``"memory"``.

    Args:
        settings: Settings used to pick the storage backend (loaded from
            environment when omitted)

    Returns:
        Configured DI container
    """
    settings = settings or Settings()
    in_memory = settings.storage.backend == "memory"

    provider_instances = [
        get_provider(
            base,
            use_mock=in_memory and base.__mock_component__ == "persistence",
        )()
        for base in PROVIDERS
    ]
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
