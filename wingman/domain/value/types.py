"""Domain value objects for Wingman.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator

from wingman.domain.value.common import RootValueObject, ValueObject
from wingman.domain.value.identifiers import UserId

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
BIO_MAX_LENGTH = 500


class RequestStatus(str, Enum):
    """Status of a partnership request."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class InvitationStatus(str, Enum):
    """Status of an email invitation."""

    PENDING = "pending"
    ACCEPTED = "accepted"


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase with surrounding whitespace removed."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate the address has a local part, an @ and a dotted domain."""
        v = v.strip().lower()
        if len(v) > 255 or not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email format")
        return v


class DisplayName(RootValueObject[str]):
    """User display name, 2-50 characters after trimming."""

    @field_validator("root")
    @classmethod
    def validate_name_length(cls, v: str) -> str:
        """Validate name length."""
        v = v.strip()
        if len(v) < NAME_MIN_LENGTH or len(v) > NAME_MAX_LENGTH:
            raise ValueError(
                f"Name must be {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} characters"
            )
        return v


class Bio(RootValueObject[str]):
    """Free-text biography used for compatibility scoring.

    May be empty. An empty bio scores in the neutral band.
    """

    @field_validator("root")
    @classmethod
    def validate_bio_length(cls, v: str) -> str:
        """Validate bio length."""
        if len(v) > BIO_MAX_LENGTH:
            raise ValueError(f"Bio must be at most {BIO_MAX_LENGTH} characters")
        return v


class InvitationToken(RootValueObject[str]):
    """Opaque hex invitation token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is non-empty hex."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        if not re.fullmatch(r"[0-9a-f]+", v):
            raise ValueError("Token must be lowercase hex")
        return v

    def redacted(self) -> str:
        """Truncated form safe for logs."""
        return self.root[:8] + "..."


class MatchCandidate(ValueObject):
    """Public view of a user considered for matching.

    ``partner_id`` is filled in by storage from the partnership relation.
    """

    user_id: UserId
    name: str
    bio: str | None = None
    partner_id: UserId | None = None
    created_at: datetime

    @property
    def has_partner(self) -> bool:
        return self.partner_id is not None


class ScoredMatch(ValueObject):
    """A candidate together with its compatibility score against the requester."""

    user_id: UserId
    name: str
    bio: str | None = None
    member_since: datetime
    compatibility_score: int = Field(ge=0, le=100)
