"""Invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from wingman.application.usecase.invitation import (
    ListInvitationsUseCase,
    ValidateInvitationUseCase,
)
from wingman.application.usecase.invitation.list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
)
from wingman.application.usecase.invitation.validate_invitation import (
    ValidateInvitationRequest,
    ValidateInvitationResponse,
)
from wingman.config import Settings
from wingman.domain.service import JWTService
from wingman.domain.value import InvitationStatus
from wingman.interface.api.dependencies import require_user_id

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


@router.get("", response_model=ListInvitationsResponse)
async def list_invitations(
    request: Request,
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
    status: InvitationStatus | None = None,
) -> ListInvitationsResponse:
    """List invitations the user has sent, newest first.

    Example:
        GET /invitations?status=pending
    """
    user_id = require_user_id(request, jwt_service, settings.auth)
    return await list_invitations_use_case.execute(
        ListInvitationsRequest(sender_id=user_id, status=status)
    )


@router.get("/{token}", response_model=ValidateInvitationResponse)
async def validate_invitation(
    token: str,
    validate_invitation_use_case: FromDishka[ValidateInvitationUseCase],
) -> ValidateInvitationResponse:
    """Check an invitation token before registering (public).

    Example:
        GET /invitations/3f9c...

        Response:
        {
            "valid": true,
            "status": "pending",
            "email": "bob@example.com",
            "inviter_name": "Alice",
            "message": "Valid invitation"
        }
    """
    return await validate_invitation_use_case.execute(
        ValidateInvitationRequest(token=token)
    )
