"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from linkedout.config import Settings
from linkedout.domain.repository import (
    LeaderboardRepository,
    PostRepository,
    UnitOfWork,
    VoteRepository,
)
from linkedout.persistence.database import create_engine, create_session_factory
from linkedout.persistence.repository import (
    PostgresLeaderboardRepository,
    PostgresPostRepository,
    PostgresVoteRepository,
    SessionUnitOfWork,
)
from linkedout.persistence.repository.inmemory import (
    InMemoryLeaderboardRepository,
    InMemoryPostRepository,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from linkedout.util.di.base import ProviderBase
from linkedout.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
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

        Writes are committed by the use case through UnitOfWork. Anything
        left uncommitted is rolled back when the session closes, and an
        exception raised during the request rolls back explicitly.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work bound to the request session."""
        return SessionUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_leaderboard_repository(
        self, session: AsyncSession
    ) -> LeaderboardRepository:
        """Provide Leaderboard repository."""
        return PostgresLeaderboardRepository(session)


class InMemoryPersistenceProvider(PersistenceProvider):
    """In-process persistence provider.

    Serves ``storage.backend = "memory"`` and stands in for PostgreSQL in
    tests. Repositories are APP-scoped so state survives across requests;
    building a new container starts from empty stores.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_in_memory_post_repository(self) -> InMemoryPostRepository:
        """Provide the shared in-memory post store."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_in_memory_vote_repository(self) -> InMemoryVoteRepository:
        """Provide the shared in-memory vote store."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self, repository: InMemoryPostRepository) -> PostRepository:
        """Provide Post repository."""
        return repository

    @provide(scope=Scope.APP)
    def get_vote_repository(self, repository: InMemoryVoteRepository) -> VoteRepository:
        """Provide Vote repository."""
        return repository

    @provide(scope=Scope.APP)
    def get_leaderboard_repository(
        self,
        post_repository: InMemoryPostRepository,
        vote_repository: InMemoryVoteRepository,
    ) -> LeaderboardRepository:
        """Provide Leaderboard repository computed from the stores above."""
        return InMemoryLeaderboardRepository(
            post_repository=post_repository,
            vote_repository=vote_repository,
        )

    @provide(scope=Scope.APP)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide unit of work."""
        return InMemoryUnitOfWork()
