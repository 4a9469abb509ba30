"""Partnership request entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from wingman.domain.model.common import DomainModel
from wingman.domain.value import PartnershipRequestId, RequestStatus, UserId


class PartnershipRequest(DomainModel):
    """A direct request from one user to partner with another.

    Business rules:
    - sender and receiver differ
    - At most one pending request per unordered pair
    - Only the receiver moves it out of pending, and both outcomes are terminal
    """

    id: PartnershipRequestId
    sender_id: UserId
    receiver_id: UserId
    status: RequestStatus = RequestStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
    responded_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_distinct_users(self) -> "PartnershipRequest":
        if self.sender_id == self.receiver_id:
            raise ValueError("Cannot send a partnership request to yourself")
        return self

    @property
    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING

    def involves(self, user_id: UserId) -> bool:
        return user_id in (self.sender_id, self.receiver_id)
