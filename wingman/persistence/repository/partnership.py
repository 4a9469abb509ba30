"""PostgreSQL implementation of Partnership repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from wingman.domain.model import Partnership
from wingman.domain.repository import PartnershipRepository
from wingman.domain.value import UserId
from wingman.persistence.mappers import partnership_to_dict, row_to_partnership
from wingman.persistence.tables import partnerships_table


class PostgresPartnershipRepository(PartnershipRepository):
    """PostgreSQL implementation of PartnershipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _involves(user_id: UserId):
        return or_(
            partnerships_table.c.user1_id == user_id,
            partnerships_table.c.user2_id == user_id,
        )

    async def find_by_user(self, user_id: UserId) -> Optional[Partnership]:
        """Find the partnership a user belongs to.

        Args:
            user_id: User ID

        Returns:
            Partnership if found, None otherwise
        """
        stmt = select(partnerships_table).where(self._involves(user_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_partnership(dict(row)) if row else None

    async def find_by_pair(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Partnership]:
        """Find the partnership between two users."""
        first, second = sorted((user_a, user_b), key=str)
        stmt = select(partnerships_table).where(
            and_(
                partnerships_table.c.user1_id == first,
                partnerships_table.c.user2_id == second,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_partnership(dict(row)) if row else None

    async def exists_for_user(self, user_id: UserId) -> bool:
        """Check if the user is in a partnership.

        Fast check without loading the partnership.
        """
        stmt = select(partnerships_table.c.id).where(self._involves(user_id))
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, partnership: Partnership) -> Partnership:
        """Insert a partnership inside a savepoint.

        Raises:
            IntegrityError: If either user is already partnered
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(partnerships_table).values(**partnership_to_dict(partnership))
            )
        await self.session.flush()
        return partnership

    async def delete(self, partnership: Partnership) -> None:
        """Delete a partnership."""
        stmt = delete(partnerships_table).where(
            partnerships_table.c.id == partnership.id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def find_all(self) -> list[Partnership]:
        """List every partnership, oldest first."""
        stmt = select(partnerships_table).order_by(partnerships_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_partnership(dict(row)) for row in result.mappings().all()]
