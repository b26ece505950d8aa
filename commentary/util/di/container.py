"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from commentary.config import Settings
from commentary.util.di import PROVIDERS, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the production container (every component real).

    Args:
        settings: Settings to serve from the container; loaded from the
            environment when omitted

    Returns:
        Configured DI container
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *providers, context={Settings: settings or Settings()}
    )
