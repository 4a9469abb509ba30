"""Unmatch use case."""

from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_uuid
from wingman.domain.service import PartnershipService
from wingman.domain.value import UserId


class UnmatchRequest(BaseModel):
    """Unmatch request."""

    user_id: str


class UnmatchResponse(BaseModel):
    """Unmatch response."""

    former_partner_id: str


class UnmatchUseCase(BaseUseCase):
    """Use case for dissolving the user's partnership."""

    def __init__(self, partnership_service: PartnershipService) -> None:
        self.partnership_service = partnership_service

    async def execute(self, request: UnmatchRequest) -> UnmatchResponse:
        """Dissolve the partnership.

        Raises:
            NoPartnerError: If the user has no partner
        """
        user_id = UserId(parse_uuid(request.user_id, "user id"))
        former_partner_id = await self.partnership_service.unmatch(user_id)
        return UnmatchResponse(former_partner_id=str(former_partner_id))
