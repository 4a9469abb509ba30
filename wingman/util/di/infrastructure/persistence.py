"""Persistence infrastructure providers."""

from collections.abc import AsyncGenerator, AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from wingman.config import Settings
from wingman.domain.repository import (
    InvitationRepository,
    PartnershipRepository,
    PartnershipRequestRepository,
    UserRepository,
)
from wingman.persistence.database import create_engine, create_session_factory
from wingman.persistence.repository import (
    PostgresInvitationRepository,
    PostgresPartnershipRepository,
    PostgresPartnershipRequestRepository,
    PostgresUserRepository,
)
from wingman.util.di.base import ProviderBase
from wingman.util.observability import instrument_sqlalchemy


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
    ) -> AsyncGenerator[AsyncSession, BaseException | None]:
        """Provide database session for request scope.

        dishka sends the exception that ended the scope (or None) back into
        the generator when the scope closes: commit on None, roll back
        otherwise.
        """
        async with session_factory() as session:
            exception = yield session
            if exception is None:
                await session.commit()
                logfire.info("Session committed")
            else:
                logfire.warn("Session rollback", error=str(exception))
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_partnership_repository(
        self, session: AsyncSession
    ) -> PartnershipRepository:
        """Provide Partnership repository."""
        return PostgresPartnershipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_partnership_request_repository(
        self, session: AsyncSession
    ) -> PartnershipRequestRepository:
        """Provide PartnershipRequest repository."""
        return PostgresPartnershipRequestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)
