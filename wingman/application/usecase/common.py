"""Response models shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from wingman.domain.model import User


class UserInfo(BaseModel):
    """Public profile of a user."""

    id: str
    name: str
    bio: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            name=user.name.root,
            bio=user.bio_text,
            created_at=user.created_at,
        )


class AccountInfo(UserInfo):
    """Profile of the authenticated user, including private fields."""

    email: str
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "AccountInfo":
        return cls(
            id=str(user.id),
            name=user.name.root,
            bio=user.bio_text,
            email=user.email.root,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
