"""User aggregate root.

Users register with email and password and carry a free-text bio that
drives compatibility scoring. Whether a user has a partner is answered by
the partnership relation, never by a field on the user.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from wingman.domain.model.common import DomainModel
from wingman.domain.value import Bio, DisplayName, Email, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    name: DisplayName
    email: Email
    bio: Optional[Bio] = None
    password_hash: str = Field(repr=False)
    # SHA-256 of the outstanding password reset token, never the token itself
    reset_token_hash: Optional[str] = Field(default=None, repr=False)
    reset_token_expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def bio_text(self) -> str | None:
        """Raw bio text, or None when the user has not written one."""
        return self.bio.root if self.bio is not None else None

    def has_valid_reset_token(self, token_hash: str, now: datetime) -> bool:
        """Whether token_hash matches the outstanding, unexpired reset token.

        Args:
            token_hash: SHA-256 hex digest of the presented token
            now: Timezone-aware current time
        """
        return (
            self.reset_token_hash is not None
            and self.reset_token_expires_at is not None
            and self.reset_token_hash == token_hash
            and self.reset_token_expires_at > now
        )
