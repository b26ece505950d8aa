"""Standard library logging setup.

Our own code logs through logfire. SQLAlchemy, asyncpg and alembic use the
standard library; their records are forwarded to logfire as well so there is
one stream to read.
"""

import logging

import logfire

from commentary.config import Settings


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into logfire and quieten chatty libraries.

    Call after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by libraries or earlier calls
    )

    # SQL echo is controlled by DATABASE__ECHO, not by the root level
    sql_level = logging.INFO if settings.database.echo else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("alembic").setLevel(logging.INFO)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
