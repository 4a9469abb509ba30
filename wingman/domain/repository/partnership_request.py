"""Partnership request repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from wingman.domain.model.partnership_request import PartnershipRequest
from wingman.domain.value import PartnershipRequestId, UserId


class PartnershipRequestRepository(ABC):
    """Repository for PartnershipRequest entity."""

    @abstractmethod
    async def find_by_id(
        self, request_id: PartnershipRequestId
    ) -> Optional[PartnershipRequest]:
        """Find a request by ID.

        Args:
            request_id: The request's unique identifier

        Returns:
            The request if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_between(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[PartnershipRequest]:
        """Find a pending request between two users in either direction.

        Args:
            user_a: First user
            user_b: Second user

        Returns:
            The pending request if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_for_user(self, user_id: UserId) -> list[PartnershipRequest]:
        """List pending requests the user sent or received.

        Args:
            user_id: The user's ID

        Returns:
            Pending requests, newest first
        """
        pass

    @abstractmethod
    async def save(self, request: PartnershipRequest) -> PartnershipRequest:
        """Save a request (create or update).

        Args:
            request: The request to save

        Returns:
            The saved request

        Raises:
            IntegrityError: If a pending request already exists for the pair
        """
        pass
