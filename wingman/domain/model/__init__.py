"""Domain model entities for Wingman."""

from wingman.domain.model.invitation import Invitation
from wingman.domain.model.partnership import Partnership
from wingman.domain.model.partnership_request import PartnershipRequest
from wingman.domain.model.user import User

__all__ = [
    "User",
    "Partnership",
    "PartnershipRequest",
    "Invitation",
]
