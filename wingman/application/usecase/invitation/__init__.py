"""Invitation use cases."""

from .invite_by_email import InviteByEmailUseCase
from .list_invitations import ListInvitationsUseCase
from .validate_invitation import ValidateInvitationUseCase

__all__ = [
    "InviteByEmailUseCase",
    "ListInvitationsUseCase",
    "ValidateInvitationUseCase",
]
