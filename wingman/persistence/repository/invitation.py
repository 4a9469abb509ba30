"""PostgreSQL implementation of Invitation repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from wingman.domain.model import Invitation
from wingman.domain.repository import InvitationRepository
from wingman.domain.value import (
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)
from wingman.persistence.mappers import invitation_to_dict, row_to_invitation
from wingman.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: Invitation ID to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token.

        Args:
            token: Invitation token to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: Invitation to save

        Returns:
            Saved invitation
        """
        invitation_dict = invitation_to_dict(invitation)

        # Check if invitation exists
        existing = await self.find_by_id(invitation.id)

        if existing:
            # Update existing
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
            await self.session.execute(stmt)
        else:
            # Insert new, isolated so a token collision keeps the session usable
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(invitations_table).values(**invitation_dict)
                )

        await self.session.flush()
        return invitation

    async def find_by_sender(
        self, sender_id: UserId, status: Optional[InvitationStatus] = None
    ) -> list[Invitation]:
        """Find invitations by sender.

        Args:
            sender_id: Inviting user ID
            status: Optional filter by status

        Returns:
            Matching invitations, newest first
        """
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.sender_id == sender_id)
            .order_by(invitations_table.c.created_at.desc())
        )

        if status:
            stmt = stmt.where(invitations_table.c.status == status.value)

        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invitation(dict(row)) for row in rows]
