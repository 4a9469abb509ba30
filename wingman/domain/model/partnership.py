"""Partnership entity.

A partnership is a symmetric relation between exactly two users, stored
once with its members in canonical order.
"""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from wingman.domain.model.common import DomainModel
from wingman.domain.value import PartnershipId, UserId


class Partnership(DomainModel):
    """Partnership entity.

    Business rules:
    - user1_id sorts before user2_id (string comparison of the UUIDs)
    - A user appears in at most one partnership
    - Deleted outright on unmatch; there is no inactive state
    """

    id: PartnershipId
    user1_id: UserId
    user2_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="before")
    @classmethod
    def canonicalize_members(cls, data: Any) -> Any:
        """Swap members so the lexicographically smaller id comes first."""
        if isinstance(data, dict):
            user1 = data.get("user1_id")
            user2 = data.get("user2_id")
            if user1 is not None and user2 is not None:
                if str(user1) == str(user2):
                    raise ValueError("A user cannot partner with themselves")
                if str(user2) < str(user1):
                    data = {**data, "user1_id": user2, "user2_id": user1}
        return data

    @classmethod
    def between(
        cls,
        partnership_id: PartnershipId,
        user_a: UserId,
        user_b: UserId,
        created_at: datetime | None = None,
    ) -> "Partnership":
        """Build the canonical partnership for an unordered pair."""
        return cls(
            id=partnership_id,
            user1_id=user_a,
            user2_id=user_b,
            created_at=created_at or datetime.now(),
        )

    def includes(self, user_id: UserId) -> bool:
        return user_id in (self.user1_id, self.user2_id)

    def partner_of(self, user_id: UserId) -> UserId:
        """Return the other member of the partnership.

        Raises:
            ValueError: If user_id is not a member
        """
        if user_id == self.user1_id:
            return self.user2_id
        if user_id == self.user2_id:
            return self.user1_id
        raise ValueError(f"User {user_id} is not a member of partnership {self.id}")
