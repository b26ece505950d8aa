"""Engine and session factory for the comment store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from commentary.config import DatabaseSettings


def create_engine(database: DatabaseSettings) -> AsyncEngine:
    """Create the async engine (asyncpg driver).

    No connection is opened until the first query.
    """
    return create_async_engine(
        database.url,
        echo=database.echo,
        pool_pre_ping=True,  # Drop connections the server closed while idle
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Repositories commit explicitly; rows returned before a commit stay
    usable after it.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
