"""Domain value objects for Wingman."""

from wingman.domain.value.identifiers import (
    InvitationId,
    PartnershipId,
    PartnershipRequestId,
    UserId,
)
from wingman.domain.value.types import (
    Bio,
    DisplayName,
    Email,
    InvitationStatus,
    InvitationToken,
    MatchCandidate,
    RequestStatus,
    ScoredMatch,
)

__all__ = [
    # Identifiers
    "UserId",
    "PartnershipId",
    "PartnershipRequestId",
    "InvitationId",
    # Types
    "Bio",
    "DisplayName",
    "Email",
    "InvitationStatus",
    "InvitationToken",
    "MatchCandidate",
    "RequestStatus",
    "ScoredMatch",
]
