"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from commentary.config import DatabaseSettings
from commentary.domain.repository import CommentRepository
from commentary.persistence.database import create_engine, create_session_factory
from commentary.persistence.repository import PostgresCommentRepository
from commentary.util.di.base import ProviderBase
from commentary.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(
        self, database: DatabaseSettings
    ) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app container closes."""
        engine = create_engine(database)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The comment repository commits after every write, so there is no
        request-wide commit or rollback here; whatever was written before a
        failure stays written.
        """
        async with session_factory() as session:
            yield session
            logfire.debug("Session closed")

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)
