"""In-memory partnership request repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from wingman.domain.model.partnership_request import PartnershipRequest
from wingman.domain.repository.partnership_request import (
    PartnershipRequestRepository,
)
from wingman.domain.value import PartnershipRequestId, UserId


class InMemoryPartnershipRequestRepository(PartnershipRequestRepository):
    """In-memory implementation of PartnershipRequestRepository for testing."""

    def __init__(self) -> None:
        self._requests: dict[PartnershipRequestId, PartnershipRequest] = {}

    async def find_by_id(
        self, request_id: PartnershipRequestId
    ) -> Optional[PartnershipRequest]:
        """Find a request by ID."""
        return self._requests.get(request_id)

    async def find_pending_between(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[PartnershipRequest]:
        """Find a pending request between two users, either direction."""
        for request in self._requests.values():
            if request.is_pending and {request.sender_id, request.receiver_id} == {
                user_a,
                user_b,
            }:
                return request
        return None

    async def find_pending_for_user(self, user_id: UserId) -> list[PartnershipRequest]:
        """List pending requests sent or received by the user, newest first."""
        pending = [
            r for r in self._requests.values() if r.is_pending and r.involves(user_id)
        ]
        return sorted(pending, key=lambda r: r.created_at, reverse=True)

    async def save(self, request: PartnershipRequest) -> PartnershipRequest:
        """Save a request (create or update).

        Raises:
            IntegrityError: If a pending request already exists for the pair
        """
        if request.id not in self._requests and request.is_pending:
            if await self.find_pending_between(request.sender_id, request.receiver_id):
                raise IntegrityError("Duplicate pending request", None, Exception())
        self._requests[request.id] = request
        return request
