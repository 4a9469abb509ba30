"""Invitation entity.

Invitations let a user bring a partner onto the platform by email. The
invitee registers with the token and is partnered with the inviter in the
same transaction.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from wingman.domain.model.common import DomainModel
from wingman.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - Only unpartnered users may invite
    - The target email must not belong to a registered user
    - Invitations never expire
    - pending -> accepted happens at most once, on matching registration
    """

    id: InvitationId
    sender_id: UserId
    email: Email
    token: InvitationToken
    status: InvitationStatus = InvitationStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
    accepted_at: Optional[datetime] = None
    accepted_by_user_id: Optional[UserId] = None

    @property
    def is_pending(self) -> bool:
        return self.status == InvitationStatus.PENDING

    def is_redeemable_by(self, email: Email) -> bool:
        """Whether a registrant with this email may redeem the invitation.

        Both addresses are normalized Email values, so case is ignored.
        """
        return self.is_pending and self.email == email
