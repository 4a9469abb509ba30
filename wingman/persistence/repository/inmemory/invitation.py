"""In-memory invitation repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from wingman.domain.model.invitation import Invitation
from wingman.domain.repository.invitation import InvitationRepository
from wingman.domain.value import (
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: list[Invitation] = []

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        for invitation in self._invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        for invitation in self._invitations:
            if invitation.token == token:
                return invitation
        return None

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If another invitation already uses this token
        """
        # Check for existing invitation with same ID (update case)
        for i, existing in enumerate(self._invitations):
            if existing.id == invitation.id:
                self._invitations[i] = invitation
                return invitation

        if await self.find_by_token(invitation.token):
            raise IntegrityError("Duplicate invitation token", None, Exception())

        self._invitations.append(invitation)
        return invitation

    async def find_by_sender(
        self, sender_id: UserId, status: Optional[InvitationStatus] = None
    ) -> list[Invitation]:
        """Find invitations by sender, newest first."""
        invitations = [
            i
            for i in self._invitations
            if i.sender_id == sender_id and (status is None or i.status == status)
        ]
        return sorted(invitations, key=lambda i: i.created_at, reverse=True)
