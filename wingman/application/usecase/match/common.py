"""Response models for partnership requests."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from wingman.application.usecase.common import UserInfo
from wingman.domain.model import PartnershipRequest
from wingman.domain.value import RequestStatus, UserId


class PartnershipRequestInfo(BaseModel):
    """A partnership request as seen by one of its parties."""

    id: str
    sender: UserInfo
    receiver: UserInfo
    status: RequestStatus
    direction: Literal["sent", "received"]
    created_at: datetime
    responded_at: datetime | None = None

    @classmethod
    def build(
        cls,
        request: PartnershipRequest,
        viewer_id: UserId,
        sender: UserInfo,
        receiver: UserInfo,
    ) -> "PartnershipRequestInfo":
        return cls(
            id=str(request.id),
            sender=sender,
            receiver=receiver,
            status=request.status,
            direction="sent" if request.sender_id == viewer_id else "received",
            created_at=request.created_at,
            responded_at=request.responded_at,
        )
