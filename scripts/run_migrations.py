#!/usr/bin/env python3
"""Apply comment store migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from commentary.config import Settings
from commentary.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    """Upgrade the comments schema to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"

    with logfire.span("run_migrations", target=target, environment=settings.environment):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), target)
        except Exception as e:
            logfire.error(
                "Comment store migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Leave the schema for an operator; never start against it
            raise

        logfire.info("Comment store migrated", target=target)
        return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
