"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from forum.config import Settings
from forum.util.di import PROVIDERS, get_provider
from forum.util.observability import configure_logfire


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    This is the startup hook for the fragment: Logfire is configured here
    before any provider runs. Settings are loaded from environment
    variables automatically.

    Returns:
        Configured DI container with production providers
    """
    configure_logfire(Settings())

    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
