"""Invite partner by email use case."""

from datetime import datetime

from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_uuid, parse_value
from wingman.domain.service import InvitationService
from wingman.domain.value import Email, UserId


class InviteByEmailRequest(BaseModel):
    """Invite by email request."""

    sender_id: str  # From authenticated user
    email: str


class InviteByEmailResponse(BaseModel):
    """Invite by email response.

    ``email_sent`` means an email was scheduled, not that it was delivered.
    The link is always returned so the inviter can share it directly.
    """

    invitation_id: str
    email: str
    invitation_url: str
    email_sent: bool
    created_at: datetime


class InviteByEmailUseCase(BaseUseCase):
    """Use case for inviting someone who is not registered yet."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize invite by email use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: InviteByEmailRequest) -> InviteByEmailResponse:
        """Create the invitation and schedule the email.

        Raises:
            ValidationError: If the email is malformed
            AlreadyPartneredError: If the sender already has a partner
            EmailTakenError: If the email is already registered
        """
        sender_id = UserId(parse_uuid(request.sender_id, "user id"))
        email = parse_value(Email, request.email)

        outcome = await self.invitation_service.invite_by_email(sender_id, email)
        return InviteByEmailResponse(
            invitation_id=str(outcome.invitation.id),
            email=outcome.invitation.email.root,
            invitation_url=outcome.invitation_url,
            email_sent=outcome.email_sent,
            created_at=outcome.invitation.created_at,
        )
