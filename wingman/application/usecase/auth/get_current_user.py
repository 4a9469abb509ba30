"""Get current user use case."""

from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_uuid
from wingman.application.usecase.common import AccountInfo, UserInfo
from wingman.domain.service import PartnershipService, UserService
from wingman.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From verified JWT


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: AccountInfo
    partner: UserInfo | None = None


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for loading the authenticated user and their partner."""

    def __init__(
        self, user_service: UserService, partnership_service: PartnershipService
    ) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
            partnership_service: Partnership domain service
        """
        self.user_service = user_service
        self.partnership_service = partnership_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the user and resolve their partner from the partnership relation.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user_id = UserId(parse_uuid(request.user_id, "user id"))
        user = await self.user_service.get_by_id(user_id)

        partner = None
        partner_id = await self.partnership_service.get_partner(user_id)
        if partner_id:
            partner = UserInfo.from_user(await self.user_service.get_by_id(partner_id))

        return GetCurrentUserResponse(user=AccountInfo.from_user(user), partner=partner)
