"""Validate invitation use case."""

import logfire
from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_value
from wingman.domain.error import NotFoundError, ValidationError
from wingman.domain.service import InvitationService, UserService
from wingman.domain.value import InvitationStatus, InvitationToken


class ValidateInvitationRequest(BaseModel):
    """Validate invitation request."""

    token: str


class ValidateInvitationResponse(BaseModel):
    """Validate invitation response."""

    valid: bool
    status: InvitationStatus | None = None
    email: str | None = None
    inviter_name: str | None = None
    message: str | None = None


class ValidateInvitationUseCase(BaseUseCase):
    """Use case for validating an invitation token.

    Lets the registration page prefill the invitee's email and show who
    invited them before the account is created.
    """

    def __init__(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> None:
        """Initialize validate invitation use case.

        Args:
            invitation_service: Invitation domain service
            user_service: User domain service
        """
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(
        self, request: ValidateInvitationRequest
    ) -> ValidateInvitationResponse:
        """Validate an invitation token.

        Args:
            request: Validation request with token

        Returns:
            Validation response with invitation details or the reason it is invalid
        """
        try:
            token = parse_value(InvitationToken, request.token)
        except ValidationError:
            return ValidateInvitationResponse(
                valid=False, message="Invitation not found"
            )

        with logfire.span("validate_invitation.execute", token=token.redacted()):
            invitation = await self.invitation_service.get_invitation_by_token(token)

            if not invitation:
                return ValidateInvitationResponse(
                    valid=False, message="Invitation not found"
                )

            if invitation.status == InvitationStatus.ACCEPTED:
                logfire.info(
                    "Invitation already accepted",
                    token=token.redacted(),
                    accepted_at=invitation.accepted_at,
                )
                return ValidateInvitationResponse(
                    valid=False,
                    status=invitation.status,
                    message="Invitation has already been accepted",
                )

            try:
                inviter = await self.user_service.get_by_id(invitation.sender_id)
                inviter_name = inviter.name.root
            except NotFoundError:
                inviter_name = None

            return ValidateInvitationResponse(
                valid=True,
                status=invitation.status,
                email=invitation.email.root,
                inviter_name=inviter_name,
                message="Valid invitation",
            )
