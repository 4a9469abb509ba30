"""In-memory repository implementations for testing."""

from .invitation import InMemoryInvitationRepository
from .partnership import InMemoryPartnershipRepository
from .partnership_request import InMemoryPartnershipRequestRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryInvitationRepository",
    "InMemoryPartnershipRepository",
    "InMemoryPartnershipRequestRepository",
    "InMemoryUserRepository",
]
