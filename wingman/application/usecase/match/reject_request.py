"""Reject partnership request use case."""

from datetime import datetime

from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_uuid
from wingman.domain.service import PartnershipService
from wingman.domain.value import PartnershipRequestId, RequestStatus, UserId


class RejectRequestRequest(BaseModel):
    """Reject request request."""

    request_id: str
    user_id: str


class RejectRequestResponse(BaseModel):
    """Reject request response."""

    request_id: str
    status: RequestStatus
    responded_at: datetime | None


class RejectRequestUseCase(BaseUseCase):
    """Use case for rejecting a partnership request."""

    def __init__(self, partnership_service: PartnershipService) -> None:
        self.partnership_service = partnership_service

    async def execute(self, request: RejectRequestRequest) -> RejectRequestResponse:
        request_id = PartnershipRequestId(parse_uuid(request.request_id, "request id"))
        user_id = UserId(parse_uuid(request.user_id, "user id"))

        rejected = await self.partnership_service.reject_request(request_id, user_id)
        return RejectRequestResponse(
            request_id=str(rejected.id),
            status=rejected.status,
            responded_at=rejected.responded_at,
        )
