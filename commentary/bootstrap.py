"""Composition root for hosts embedding the comment engine.

A host (HTTP app, worker, CLI) calls ``bootstrap`` once at startup, then
opens a request scope per inbound call:

    container = bootstrap()
    async with container() as request:
        authenticate = await request.get(AuthenticateUseCase)
        context = await authenticate.execute(AuthenticateRequest(credentials=token))
        create = await request.get(CreateCommentUseCase)
        await create.execute(context, CreateCommentRequest(...))
    ...
    await container.close()
"""

from dishka import AsyncContainer

from commentary.config import Settings
from commentary.util.di.container import create_container
from commentary.util.logging import setup_logging
from commentary.util.observability import configure_logfire


def bootstrap(settings: Settings | None = None) -> AsyncContainer:
    """Configure logfire and logging, then build the DI container.

    Args:
        settings: Application settings; loaded from the environment if omitted

    Returns:
        Production container serving these settings
    """
    settings = settings or Settings()

    configure_logfire(settings)
    setup_logging(settings)

    return create_container(settings)
