"""Invitation repository interface."""

from abc import ABC, abstractmethod

from wingman.domain.model.invitation import Invitation
from wingman.domain.value import (
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by token.

        Used when the invitee opens the link or registers with it.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation

        Raises:
            IntegrityError: If the token is already in use
        """
        pass

    @abstractmethod
    async def find_by_sender(
        self, sender_id: UserId, status: InvitationStatus | None = None
    ) -> list[Invitation]:
        """List invitations sent by a user.

        Args:
            sender_id: The inviter's ID
            status: Optional status filter

        Returns:
            Invitations, newest first
        """
        pass
