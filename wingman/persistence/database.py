"""Async engine and session factory for the Wingman PostgreSQL database.

One session is opened per HTTP request (see the persistence DI provider) and
shared by every repository the request touches, so a partnership, its request
and the row locks taken on both users commit or roll back together.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from wingman.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine over asyncpg, sized by DATABASE__POOL_SIZE and DATABASE__MAX_OVERFLOW.

    SQL is echoed when DEBUG is set.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped sessions.

    Repositories work with Core statements and flush explicitly; nothing is
    loaded through the ORM identity map.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
