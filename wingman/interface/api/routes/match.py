"""Matching and partnership routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel

from wingman.application.usecase.invitation import InviteByEmailUseCase
from wingman.application.usecase.invitation.invite_by_email import (
    InviteByEmailRequest,
    InviteByEmailResponse,
)
from wingman.application.usecase.match import (
    AcceptRequestUseCase,
    GetSuggestionsUseCase,
    ListRequestsUseCase,
    RejectRequestUseCase,
    SendRequestUseCase,
    UnmatchUseCase,
)
from wingman.application.usecase.match.accept_request import (
    AcceptRequestRequest,
    AcceptRequestResponse,
)
from wingman.application.usecase.match.common import PartnershipRequestInfo
from wingman.application.usecase.match.get_suggestions import (
    GetSuggestionsRequest,
    GetSuggestionsResponse,
)
from wingman.application.usecase.match.list_requests import (
    ListRequestsRequest,
    ListRequestsResponse,
)
from wingman.application.usecase.match.reject_request import (
    RejectRequestRequest,
    RejectRequestResponse,
)
from wingman.application.usecase.match.send_request import SendRequestRequest
from wingman.application.usecase.match.unmatch import (
    UnmatchRequest,
    UnmatchResponse,
)
from wingman.config import Settings
from wingman.domain.service import JWTService
from wingman.interface.api.dependencies import require_user_id

router = APIRouter(prefix="/match", tags=["match"], route_class=DishkaRoute)


class SendRequestAPIRequest(BaseModel):
    """API request for sending a partnership request."""

    partner_id: str


class InviteAPIRequest(BaseModel):
    """API request for inviting someone by email."""

    email: str


@router.get("/suggestions", response_model=GetSuggestionsResponse)
async def get_suggestions(
    request: Request,
    get_suggestions_use_case: FromDishka[GetSuggestionsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
    limit: int | None = Query(default=None, ge=1, le=50),
) -> GetSuggestionsResponse:
    """Get the most compatible unpartnered users.

    Returns an empty list when nobody else is available. Users who already
    have a partner get 400.

    Example:
        GET /match/suggestions?limit=3

        Response:
        {
            "matches": [
                {
                    "id": "...",
                    "name": "Bob",
                    "bio": "Trail running and sci-fi",
                    "compatibility_score": 78,
                    "member_since": "2025-01-15T12:34:56"
                }
            ]
        }
    """
    user_id = require_user_id(request, jwt_service, settings.auth)
    return await get_suggestions_use_case.execute(
        GetSuggestionsRequest(user_id=user_id, limit=limit)
    )


@router.post(
    "/request",
    response_model=PartnershipRequestInfo,
    status_code=status.HTTP_201_CREATED,
)
async def send_request(
    body: SendRequestAPIRequest,
    request: Request,
    send_request_use_case: FromDishka[SendRequestUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> PartnershipRequestInfo:
    """Ask another user to become partners."""
    user_id = require_user_id(request, jwt_service, settings.auth)
    return await send_request_use_case.execute(
        SendRequestRequest(sender_id=user_id, receiver_id=body.partner_id)
    )


@router.get("/requests", response_model=ListRequestsResponse)
async def list_requests(
    request: Request,
    list_requests_use_case: FromDishka[ListRequestsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> ListRequestsResponse:
    """List pending requests the user sent or received."""
    user_id = require_user_id(request, jwt_service, settings.auth)
    return await list_requests_use_case.execute(
        ListRequestsRequest(user_id=user_id)
    )


@router.post("/requests/{request_id}/accept", response_model=AcceptRequestResponse)
async def accept_request(
    request_id: str,
    request: Request,
    accept_request_use_case: FromDishka[AcceptRequestUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> AcceptRequestResponse:
    """Accept a pending request. Only the receiver may accept."""
    user_id = require_user_id(request, jwt_service, settings.auth)
    return await accept_request_use_case.execute(
        AcceptRequestRequest(request_id=request_id, user_id=user_id)
    )


@router.post("/requests/{request_id}/reject", response_model=RejectRequestResponse)
async def reject_request(
    request_id: str,
    request: Request,
    reject_request_use_case: FromDishka[RejectRequestUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> RejectRequestResponse:
    """Reject a pending request. Only the receiver may reject."""
    user_id = require_user_id(request, jwt_service, settings.auth)
    return await reject_request_use_case.execute(
        RejectRequestRequest(request_id=request_id, user_id=user_id)
    )


@router.post("/unmatch", response_model=UnmatchResponse)
async def unmatch(
    request: Request,
    unmatch_use_case: FromDishka[UnmatchUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> UnmatchResponse:
    """Dissolve the user's partnership. Both users become matchable again."""
    user_id = require_user_id(request, jwt_service, settings.auth)
    return await unmatch_use_case.execute(UnmatchRequest(user_id=user_id))


@router.post(
    "/invite",
    response_model=InviteByEmailResponse,
    status_code=status.HTTP_201_CREATED,
)
async def invite_by_email(
    body: InviteAPIRequest,
    request: Request,
    invite_by_email_use_case: FromDishka[InviteByEmailUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> InviteByEmailResponse:
    """Invite someone without an account to become the user's partner.

    The invitation link is always returned. `email_sent` is false when SMTP
    is not configured, so the user can share the link themselves.
    """
    user_id = require_user_id(request, jwt_service, settings.auth)
    return await invite_by_email_use_case.execute(
        InviteByEmailRequest(sender_id=user_id, email=body.email)
    )
