"""Repository interfaces for Wingman domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from wingman.domain.repository.invitation import InvitationRepository
from wingman.domain.repository.partnership import PartnershipRepository
from wingman.domain.repository.partnership_request import (
    PartnershipRequestRepository,
)
from wingman.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PartnershipRepository",
    "PartnershipRequestRepository",
    "InvitationRepository",
]
