"""Alembic environment.

Migrations run against the URL from ``Settings`` through the asyncpg driver.
"""

import asyncio

from alembic import context
from sqlalchemy.ext.asyncio import create_async_engine

from commentary.config import Settings
from commentary.persistence.tables import metadata

# Alembic configuration
config = context.config

# Link target metadata for autogenerate support
target_metadata = metadata


def get_url() -> str:
    return Settings().database.url


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Run migrations in 'online' mode using an async engine."""
    connectable = create_async_engine(get_url())

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (emit SQL only)."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
