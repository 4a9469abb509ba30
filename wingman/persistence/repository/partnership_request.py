"""PostgreSQL implementation of PartnershipRequest repository."""

from typing import Optional

from sqlalchemy import and_, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from wingman.domain.model import PartnershipRequest
from wingman.domain.repository import PartnershipRequestRepository
from wingman.domain.value import PartnershipRequestId, RequestStatus, UserId
from wingman.persistence.mappers import (
    partnership_request_to_dict,
    row_to_partnership_request,
)
from wingman.persistence.tables import partnership_requests_table


class PostgresPartnershipRequestRepository(PartnershipRequestRepository):
    """PostgreSQL implementation of PartnershipRequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, request_id: PartnershipRequestId
    ) -> Optional[PartnershipRequest]:
        """Find a request by ID."""
        stmt = select(partnership_requests_table).where(
            partnership_requests_table.c.id == request_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_partnership_request(dict(row)) if row else None

    async def find_pending_between(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[PartnershipRequest]:
        """Find a pending request between two users, either direction."""
        t = partnership_requests_table
        stmt = select(t).where(
            and_(
                t.c.status == RequestStatus.PENDING.value,
                or_(
                    and_(t.c.sender_id == user_a, t.c.receiver_id == user_b),
                    and_(t.c.sender_id == user_b, t.c.receiver_id == user_a),
                ),
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_partnership_request(dict(row)) if row else None

    async def find_pending_for_user(self, user_id: UserId) -> list[PartnershipRequest]:
        """List pending requests sent or received by the user, newest first."""
        t = partnership_requests_table
        stmt = (
            select(t)
            .where(
                and_(
                    t.c.status == RequestStatus.PENDING.value,
                    or_(t.c.sender_id == user_id, t.c.receiver_id == user_id),
                )
            )
            .order_by(t.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [
            row_to_partnership_request(dict(row)) for row in result.mappings().all()
        ]

    async def save(self, request: PartnershipRequest) -> PartnershipRequest:
        """Save a request (create or update).

        Raises:
            IntegrityError: If a pending request already exists for the pair
        """
        request_dict = partnership_request_to_dict(request)

        existing = await self.find_by_id(request.id)

        if existing:
            stmt = (
                update(partnership_requests_table)
                .where(partnership_requests_table.c.id == request.id)
                .values(**request_dict)
            )
            await self.session.execute(stmt)
        else:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(partnership_requests_table).values(**request_dict)
                )

        await self.session.flush()
        return request
