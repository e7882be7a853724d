"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from signin.config import Settings
from signin.util.di import PROVIDERS, get_provider


def create_container(settings: Settings) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        settings: Application settings, shared with the FastAPI app

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the Request to REQUEST-scoped providers
    return make_async_container(
        *provider_instances, FastapiProvider(), context={Settings: settings}
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
