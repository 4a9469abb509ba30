"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from datetime import datetime
from typing import Any, Dict
from uuid import UUID

from wingman.domain.model import Invitation, Partnership, PartnershipRequest, User
from wingman.domain.value import (
    Bio,
    DisplayName,
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    MatchCandidate,
    PartnershipId,
    PartnershipRequestId,
    RequestStatus,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=DisplayName(row["name"]),
        email=Email(row["email"]),
        bio=Bio(row["bio"]) if row.get("bio") is not None else None,
        password_hash=row["password_hash"],
        reset_token_hash=row.get("reset_token_hash"),
        reset_token_expires_at=row.get("reset_token_expires_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "name": user.name.root,
        "email": user.email.root,
        "bio": user.bio_text,
        "password_hash": user.password_hash,
        "reset_token_hash": user.reset_token_hash,
        "reset_token_expires_at": user.reset_token_expires_at,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_match_candidate(row: Dict[str, Any]) -> MatchCandidate:
    """Convert a users row joined with the partnership relation.

    Expects a ``partner_id`` column, NULL for unpartnered users.
    """
    partner_id = row.get("partner_id")
    return MatchCandidate(
        user_id=UserId(_uuid(row["id"])),
        name=row["name"],
        bio=row.get("bio"),
        partner_id=UserId(_uuid(partner_id)) if partner_id else None,
        created_at=row["created_at"],
    )


def row_to_partnership(row: Dict[str, Any]) -> Partnership:
    """Convert database row to Partnership domain model."""
    return Partnership(
        id=PartnershipId(_uuid(row["id"])),
        user1_id=UserId(_uuid(row["user1_id"])),
        user2_id=UserId(_uuid(row["user2_id"])),
        created_at=row["created_at"],
    )


def partnership_to_dict(partnership: Partnership) -> Dict[str, Any]:
    """Convert Partnership domain model to database dict."""
    return partnership.model_dump()


def row_to_partnership_request(row: Dict[str, Any]) -> PartnershipRequest:
    """Convert database row to PartnershipRequest domain model."""
    return PartnershipRequest(
        id=PartnershipRequestId(_uuid(row["id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        receiver_id=UserId(_uuid(row["receiver_id"])),
        status=RequestStatus(row["status"]),
        created_at=row["created_at"],
        responded_at=row.get("responded_at"),
    )


def partnership_request_to_dict(request: PartnershipRequest) -> Dict[str, Any]:
    """Convert PartnershipRequest domain model to database dict."""
    data = request.model_dump()
    data["status"] = request.status.value
    return data


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    accepted_by = row.get("accepted_by_user_id")
    accepted_at: datetime | None = row.get("accepted_at")
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        email=Email(row["email"]),
        token=InvitationToken(root=row["token"]),
        status=InvitationStatus(row["status"]),
        created_at=row["created_at"],
        accepted_at=accepted_at,
        accepted_by_user_id=UserId(_uuid(accepted_by)) if accepted_by else None,
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    Args:
        invitation: Invitation domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": invitation.id,
        "sender_id": invitation.sender_id,
        "email": invitation.email.root,
        "token": invitation.token.root,
        "status": invitation.status.value,
        "created_at": invitation.created_at,
        "accepted_at": invitation.accepted_at,
        "accepted_by_user_id": invitation.accepted_by_user_id,
    }
