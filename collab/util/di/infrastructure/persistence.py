"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from collab.config import Settings
from collab.domain.repository import (
    AccessRecordRepository,
    ActivityRepository,
    CommentRepository,
    InviteRepository,
    MemberRepository,
    ObjectiveRepository,
    ShareLinkRepository,
)
from collab.persistence.database import create_engine, create_session_factory
from collab.persistence.repository import (
    PostgresAccessRecordRepository,
    PostgresActivityRepository,
    PostgresCommentRepository,
    PostgresInviteRepository,
    PostgresMemberRepository,
    PostgresObjectiveRepository,
    PostgresShareLinkRepository,
)
from collab.util.di.base import ProviderBase
from collab.util.observability import instrument_sqlalchemy


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

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_share_link_repository(
        self, session: AsyncSession
    ) -> ShareLinkRepository:
        """Provide ShareLink repository."""
        return PostgresShareLinkRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_access_record_repository(
        self, session: AsyncSession
    ) -> AccessRecordRepository:
        """Provide AccessRecord repository."""
        return PostgresAccessRecordRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, session: AsyncSession) -> InviteRepository:
        """Provide Invite repository."""
        return PostgresInviteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_objective_repository(
        self, session: AsyncSession
    ) -> ObjectiveRepository:
        """Provide Objective repository."""
        return PostgresObjectiveRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_activity_repository(self, session: AsyncSession) -> ActivityRepository:
        """Provide Activity repository."""
        return PostgresActivityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_member_repository(self, session: AsyncSession) -> MemberRepository:
        """Provide collaborator roster repository."""
        return PostgresMemberRepository(session)
