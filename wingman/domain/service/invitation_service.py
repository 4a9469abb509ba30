"""Invitation domain service."""

import secrets
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from wingman.config import Settings
from wingman.domain.error import (
    AlreadyPartneredError,
    ConflictError,
    EmailTakenError,
)
from wingman.domain.model import Invitation, Partnership, User
from wingman.domain.repository import InvitationRepository, UserRepository
from wingman.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)
from wingman.domain.value.common import ValueObject

from .base import Service
from .email_service import EmailService, build_invitation_email
from .partnership_service import PartnershipService
from .user_service import UserService


class InvitationOutcome(ValueObject):
    """Result of inviting someone by email."""

    invitation: Invitation
    invitation_url: str
    email_sent: bool


class InvitationService(Service):
    """Domain service for email invitations."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        user_repository: UserRepository,
        user_service: UserService,
        partnership_service: PartnershipService,
        email_service: EmailService,
        settings: Settings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            user_repository: User repository
            user_service: User domain service
            partnership_service: Partnership domain service
            email_service: Background email sender
            settings: Application settings (frontend URL, token size)
        """
        self.invitation_repository = invitation_repository
        self.user_repository = user_repository
        self.user_service = user_service
        self.partnership_service = partnership_service
        self.email_service = email_service
        self.settings = settings

    def invitation_url(self, token: InvitationToken) -> str:
        """Registration link carrying the invitation token."""
        return f"{self.settings.api.frontend_url}/register?inviteToken={token.root}"

    async def invite_by_email(self, sender_id: UserId, email: Email) -> InvitationOutcome:
        """Invite a not-yet-registered person to become the sender's partner.

        Args:
            sender_id: Inviting user
            email: Invitee's email address

        Returns:
            The pending invitation, its link, and whether an email was scheduled

        Raises:
            NotFoundError: If the sender does not exist
            AlreadyPartneredError: If the sender already has a partner
            EmailTakenError: If the email belongs to a registered user
        """
        with logfire.span("invitation_service.invite_by_email", sender_id=str(sender_id)):
            sender = await self.user_service.get_by_id(sender_id)

            if await self.partnership_service.has_partner(sender_id):
                raise AlreadyPartneredError(
                    str(sender_id), "You already have a partner"
                )

            if await self.user_repository.find_by_email(email):
                logfire.warn("Invitation to registered email", sender_id=str(sender_id))
                raise EmailTakenError(email.root)

            token = InvitationToken(
                secrets.token_hex(self.settings.invitations.token_bytes)
            )
            invitation = Invitation(
                id=InvitationId(uuid4()),
                sender_id=sender_id,
                email=email,
                token=token,
                status=InvitationStatus.PENDING,
                created_at=datetime.now(),
            )

            try:
                saved = await self.invitation_repository.save(invitation)
            except IntegrityError:
                logfire.error("Invitation token collision", token=token.redacted())
                raise ConflictError("Could not allocate an invitation token")

            url = self.invitation_url(token)
            email_sent = self.email_service.send_in_background(
                build_invitation_email(email.root, sender.name.root, url)
            )

            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                sender_id=str(sender_id),
                token=token.redacted(),
                email_sent=email_sent,
            )
            return InvitationOutcome(
                invitation=saved, invitation_url=url, email_sent=email_sent
            )

    async def get_invitation_by_token(self, token: InvitationToken) -> Invitation | None:
        """Get invitation by token.

        Args:
            token: Invitation token

        Returns:
            Invitation if found, None otherwise
        """
        with logfire.span(
            "invitation_service.get_invitation_by_token", token=token.redacted()
        ):
            invitation = await self.invitation_repository.find_by_token(token)
            if invitation:
                logfire.info(
                    "Invitation found",
                    invitation_id=str(invitation.id),
                    status=invitation.status.value,
                )
            else:
                logfire.warn("Invitation not found", token=token.redacted())
            return invitation

    async def list_invitations(
        self, sender_id: UserId, status: InvitationStatus | None = None
    ) -> list[Invitation]:
        """List invitations sent by a user, newest first."""
        with logfire.span(
            "invitation_service.list_invitations",
            sender_id=str(sender_id),
            status=status.value if status else None,
        ):
            invitations = await self.invitation_repository.find_by_sender(
                sender_id, status
            )
            logfire.info(
                "Invitations listed", sender_id=str(sender_id), count=len(invitations)
            )
            return invitations

    async def redeem_invitation(
        self, new_user: User, token: InvitationToken
    ) -> Partnership | None:
        """Partner a freshly registered user with the person who invited them.

        Runs in the registration transaction. An unusable token never blocks
        registration: the user is created either way and the invitation is
        left untouched.

        Args:
            new_user: The user just created
            token: Token from the invitation link

        Returns:
            The new partnership, or None if the invitation could not be used
        """
        with logfire.span(
            "invitation_service.redeem_invitation",
            user_id=str(new_user.id),
            token=token.redacted(),
        ):
            invitation = await self.invitation_repository.find_by_token(token)
            if not invitation:
                logfire.warn("Unknown invitation token", token=token.redacted())
                return None
            if not invitation.is_redeemable_by(new_user.email):
                logfire.warn(
                    "Invitation not redeemable",
                    invitation_id=str(invitation.id),
                    status=invitation.status.value,
                )
                return None

            try:
                partnership = await self.partnership_service.create_partnership(
                    invitation.sender_id, new_user.id
                )
            except AlreadyPartneredError:
                logfire.warn(
                    "Inviter partnered before invitation was redeemed",
                    invitation_id=str(invitation.id),
                    sender_id=str(invitation.sender_id),
                )
                return None

            await self.invitation_repository.save(
                invitation.model_copy(
                    update={
                        "status": InvitationStatus.ACCEPTED,
                        "accepted_at": datetime.now(),
                        "accepted_by_user_id": new_user.id,
                    }
                )
            )
            logfire.info(
                "Invitation redeemed",
                invitation_id=str(invitation.id),
                partnership_id=str(partnership.id),
            )
            return partnership
