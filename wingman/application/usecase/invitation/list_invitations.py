"""List sent invitations use case."""

from datetime import datetime

from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_uuid
from wingman.domain.service import InvitationService
from wingman.domain.value import InvitationStatus, UserId


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    sender_id: str
    status: InvitationStatus | None = None


class InvitationInfo(BaseModel):
    """Invitation as shown to its sender."""

    id: str
    email: str
    status: InvitationStatus
    invitation_url: str
    created_at: datetime
    accepted_at: datetime | None


class ListInvitationsResponse(BaseModel):
    """List invitations response."""

    invitations: list[InvitationInfo]


class ListInvitationsUseCase(BaseUseCase):
    """Use case for listing invitations the user has sent."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        sender_id = UserId(parse_uuid(request.sender_id, "user id"))
        invitations = await self.invitation_service.list_invitations(
            sender_id, request.status
        )
        return ListInvitationsResponse(
            invitations=[
                InvitationInfo(
                    id=str(invitation.id),
                    email=invitation.email.root,
                    status=invitation.status,
                    invitation_url=self.invitation_service.invitation_url(
                        invitation.token
                    ),
                    created_at=invitation.created_at,
                    accepted_at=invitation.accepted_at,
                )
                for invitation in invitations
            ]
        )
