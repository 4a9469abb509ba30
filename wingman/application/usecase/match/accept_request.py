"""Accept partnership request use case."""

from datetime import datetime

from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_uuid
from wingman.application.usecase.common import UserInfo
from wingman.domain.service import PartnershipService, UserService
from wingman.domain.value import PartnershipRequestId, UserId


class AcceptRequestRequest(BaseModel):
    """Accept request request."""

    request_id: str
    user_id: str  # Must be the receiver


class AcceptRequestResponse(BaseModel):
    """Accept request response."""

    partnership_id: str
    partner: UserInfo
    matched_at: datetime


class AcceptRequestUseCase(BaseUseCase):
    """Use case for accepting a partnership request."""

    def __init__(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> None:
        """Initialize accept request use case.

        Args:
            partnership_service: Partnership domain service
            user_service: User domain service
        """
        self.partnership_service = partnership_service
        self.user_service = user_service

    async def execute(self, request: AcceptRequestRequest) -> AcceptRequestResponse:
        """Accept the request and return the new partner.

        Raises:
            NotFoundError: If the request does not exist
            NotAuthorizedError: If the user is not the receiver
            InvalidStateError: If the request is no longer pending
            AlreadyPartneredError: If either user has partnered meanwhile
            ConflictError: If a concurrent accept won
        """
        request_id = PartnershipRequestId(parse_uuid(request.request_id, "request id"))
        user_id = UserId(parse_uuid(request.user_id, "user id"))

        partnership = await self.partnership_service.accept_request(
            request_id, user_id
        )
        partner = await self.user_service.get_by_id(partnership.partner_of(user_id))

        return AcceptRequestResponse(
            partnership_id=str(partnership.id),
            partner=UserInfo.from_user(partner),
            matched_at=partnership.created_at,
        )
