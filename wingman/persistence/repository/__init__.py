"""PostgreSQL repository implementations."""

from wingman.persistence.repository.invitation import PostgresInvitationRepository
from wingman.persistence.repository.partnership import PostgresPartnershipRepository
from wingman.persistence.repository.partnership_request import (
    PostgresPartnershipRequestRepository,
)
from wingman.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPartnershipRepository",
    "PostgresPartnershipRequestRepository",
    "PostgresInvitationRepository",
]
