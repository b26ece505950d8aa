"""Observability configuration using Logfire.

Domain services open a span per operation and log outcomes with keyword
attributes:

    with logfire.span("reply_service.create_reply", parent_id=str(parent_id)):
        ...
        logfire.info("Reply created", reply_id=str(reply.id))

Use cases add a span tagged with the request's correlation ID, so every
record of one request can be found together.
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from commentary.config import Settings

SERVICE_NAME = "commentary"
SERVICE_VERSION = "0.1.0"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Records go to the console always, and to Logfire cloud when
    ``settings.observability.sends_to_logfire`` is true.

    Args:
        settings: Application settings
    """
    observability = settings.observability

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=observability.sends_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=observability.sends_to_logfire,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every query the engine runs.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Tag SQL with the current span context
    )
