"""Send partnership request use case."""

from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_uuid
from wingman.application.usecase.common import UserInfo
from wingman.domain.service import PartnershipService, UserService
from wingman.domain.value import UserId

from .common import PartnershipRequestInfo


class SendRequestRequest(BaseModel):
    """Send partnership request."""

    sender_id: str  # From authenticated user
    receiver_id: str


class SendRequestUseCase(BaseUseCase):
    """Use case for asking another user to become partners."""

    def __init__(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> None:
        """Initialize send request use case.

        Args:
            partnership_service: Partnership domain service
            user_service: User domain service
        """
        self.partnership_service = partnership_service
        self.user_service = user_service

    async def execute(self, request: SendRequestRequest) -> PartnershipRequestInfo:
        """Create a pending request.

        Raises:
            ValidationError: If the receiver id is malformed or is the sender
            NotFoundError: If the receiver does not exist
            AlreadyPartneredError: If either user already has a partner
            DuplicatePendingError: If a pending request already exists
        """
        sender_id = UserId(parse_uuid(request.sender_id, "user id"))
        receiver_id = UserId(parse_uuid(request.receiver_id, "partner id"))

        created = await self.partnership_service.send_request(sender_id, receiver_id)

        sender = await self.user_service.get_by_id(sender_id)
        receiver = await self.user_service.get_by_id(receiver_id)
        return PartnershipRequestInfo.build(
            created,
            viewer_id=sender_id,
            sender=UserInfo.from_user(sender),
            receiver=UserInfo.from_user(receiver),
        )
