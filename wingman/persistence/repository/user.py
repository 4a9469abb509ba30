"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import case, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from wingman.domain.model import User
from wingman.domain.repository import UserRepository
from wingman.domain.value import Email, MatchCandidate, UserId
from wingman.persistence.mappers import (
    row_to_match_candidate,
    row_to_user,
    user_to_dict,
)
from wingman.persistence.tables import partnerships_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Normalized email address

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_reset_token_hash(self, token_hash: str) -> Optional[User]:
        """Find the user holding a password reset token.

        Args:
            token_hash: SHA-256 hex digest of the reset token

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.reset_token_hash == token_hash)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Inserts run inside a savepoint so a duplicate email leaves the
        session usable.

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            IntegrityError: If the email is already registered
        """
        user_dict = user_to_dict(user)

        existing = await self.find_by_id(user.id)

        if existing:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
        else:
            async with self.session.begin_nested():
                await self.session.execute(insert(users_table).values(**user_dict))

        await self.session.flush()
        return user

    async def lock(self, user_ids: list[UserId]) -> None:
        """Lock user rows with SELECT ... FOR UPDATE, in id order."""
        ordered = sorted(set(user_ids), key=str)
        stmt = (
            select(users_table.c.id)
            .where(users_table.c.id.in_(ordered))
            .order_by(users_table.c.id)
            .with_for_update()
        )
        await self.session.execute(stmt)

    async def find_match_candidates(
        self, exclude_user_id: UserId, unpartnered_only: bool = True
    ) -> list[MatchCandidate]:
        """List other users along with their current partner, if any.

        Args:
            exclude_user_id: User to leave out
            unpartnered_only: Only return users without a partnership

        Returns:
            Candidates ordered by created_at, then id
        """
        partner_id = case(
            (
                partnerships_table.c.user1_id == users_table.c.id,
                partnerships_table.c.user2_id,
            ),
            else_=partnerships_table.c.user1_id,
        ).label("partner_id")

        stmt = (
            select(
                users_table.c.id,
                users_table.c.name,
                users_table.c.bio,
                users_table.c.created_at,
                partner_id,
            )
            .select_from(
                users_table.outerjoin(
                    partnerships_table,
                    or_(
                        partnerships_table.c.user1_id == users_table.c.id,
                        partnerships_table.c.user2_id == users_table.c.id,
                    ),
                )
            )
            .where(users_table.c.id != exclude_user_id)
            .order_by(users_table.c.created_at, users_table.c.id)
        )

        if unpartnered_only:
            stmt = stmt.where(partnerships_table.c.id.is_(None))

        result = await self.session.execute(stmt)
        return [row_to_match_candidate(dict(row)) for row in result.mappings().all()]

    async def find_all(self) -> list[User]:
        """List every user, oldest first."""
        stmt = select(users_table).order_by(
            users_table.c.created_at, users_table.c.id
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]
