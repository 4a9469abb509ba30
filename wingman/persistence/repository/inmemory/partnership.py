"""In-memory partnership repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from wingman.domain.model.partnership import Partnership
from wingman.domain.repository.partnership import PartnershipRepository
from wingman.domain.value import PartnershipId, UserId


class InMemoryPartnershipRepository(PartnershipRepository):
    """In-memory implementation of PartnershipRepository for testing."""

    def __init__(self) -> None:
        self._partnerships: dict[PartnershipId, Partnership] = {}

    async def find_by_user(self, user_id: UserId) -> Optional[Partnership]:
        """Find the partnership a user belongs to."""
        for partnership in self._partnerships.values():
            if partnership.includes(user_id):
                return partnership
        return None

    async def find_by_pair(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Partnership]:
        """Find the partnership between two users."""
        for partnership in self._partnerships.values():
            if partnership.includes(user_a) and partnership.includes(user_b):
                return partnership
        return None

    async def exists_for_user(self, user_id: UserId) -> bool:
        """Check if the user is in a partnership."""
        return await self.find_by_user(user_id) is not None

    async def save(self, partnership: Partnership) -> Partnership:
        """Insert a partnership.

        Raises:
            IntegrityError: If either user is already partnered
        """
        for existing in self._partnerships.values():
            if existing.includes(partnership.user1_id) or existing.includes(
                partnership.user2_id
            ):
                raise IntegrityError("Duplicate partnership", None, Exception())
        self._partnerships[partnership.id] = partnership
        return partnership

    async def delete(self, partnership: Partnership) -> None:
        """Delete a partnership."""
        self._partnerships.pop(partnership.id, None)

    async def find_all(self) -> list[Partnership]:
        """List every partnership, oldest first."""
        return sorted(self._partnerships.values(), key=lambda p: p.created_at)
