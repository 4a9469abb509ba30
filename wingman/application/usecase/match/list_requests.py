"""List pending partnership requests use case."""

from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_uuid
from wingman.application.usecase.common import UserInfo
from wingman.domain.service import PartnershipService, UserService
from wingman.domain.value import UserId

from .common import PartnershipRequestInfo


class ListRequestsRequest(BaseModel):
    """List requests request."""

    user_id: str


class ListRequestsResponse(BaseModel):
    """Pending requests involving the user, newest first."""

    requests: list[PartnershipRequestInfo]


class ListRequestsUseCase(BaseUseCase):
    """Use case for listing pending requests the user sent or received."""

    def __init__(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> None:
        self.partnership_service = partnership_service
        self.user_service = user_service

    async def execute(self, request: ListRequestsRequest) -> ListRequestsResponse:
        user_id = UserId(parse_uuid(request.user_id, "user id"))
        pending = await self.partnership_service.list_pending_requests(user_id)

        # Resolve each distinct party once
        people: dict[UserId, UserInfo] = {}
        for item in pending:
            for party in (item.sender_id, item.receiver_id):
                if party not in people:
                    people[party] = UserInfo.from_user(
                        await self.user_service.get_by_id(party)
                    )

        return ListRequestsResponse(
            requests=[
                PartnershipRequestInfo.build(
                    item,
                    viewer_id=user_id,
                    sender=people[item.sender_id],
                    receiver=people[item.receiver_id],
                )
                for item in pending
            ]
        )
