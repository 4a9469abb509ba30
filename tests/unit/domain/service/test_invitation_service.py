"""Unit tests for InvitationService."""

from uuid import uuid4

import pytest

from wingman.adapter.smtp import MockEmailClient
from wingman.domain.error import AlreadyPartneredError, EmailTakenError, NotFoundError
from wingman.domain.repository import InvitationRepository, UserRepository
from wingman.domain.service import (
    EmailClient,
    EmailService,
    InvitationService,
    PartnershipService,
)
from wingman.domain.value import Email, InvitationStatus, InvitationToken, UserId
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInviteByEmail:
    """Tests for invite_by_email."""

    @pytest.mark.asyncio
    async def test_creates_pending_invitation_and_sends_email(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        email_service = await unit_env.get(EmailService)
        client = await unit_env.get(EmailClient)
        alice = await make_user(user_repo, "Alice")

        outcome = await service.invite_by_email(alice.id, Email("Bob@Example.com"))
        await email_service.drain()

        invitation = outcome.invitation
        assert invitation.sender_id == alice.id
        assert invitation.email.root == "bob@example.com"
        assert invitation.status == InvitationStatus.PENDING
        assert len(invitation.token.root) == 64
        assert outcome.invitation_url.endswith(
            f"/register?inviteToken={invitation.token.root}"
        )
        assert outcome.email_sent is True

        assert isinstance(client, MockEmailClient)
        [message] = client.outbox
        assert message.to == "bob@example.com"
        assert message.subject == "Alice wants you as their Wingman partner!"
        assert outcome.invitation_url in message.text
        assert outcome.invitation_url in message.html

    @pytest.mark.asyncio
    async def test_tokens_are_unique(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        alice = await make_user(user_repo, "Alice")

        first = await service.invite_by_email(alice.id, Email("bob@example.com"))
        second = await service.invite_by_email(alice.id, Email("bob@example.com"))

        assert first.invitation.token != second.invitation.token

    @pytest.mark.asyncio
    async def test_unconfigured_email_still_returns_link(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        client = await unit_env.get(EmailClient)
        client.configured = False
        alice = await make_user(user_repo, "Alice")

        outcome = await service.invite_by_email(alice.id, Email("bob@example.com"))

        assert outcome.email_sent is False
        assert outcome.invitation_url
        assert client.outbox == []

    @pytest.mark.asyncio
    async def test_delivery_failure_does_not_affect_invitation(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        invitation_repo = await unit_env.get(InvitationRepository)
        service = await unit_env.get(InvitationService)
        email_service = await unit_env.get(EmailService)
        client = await unit_env.get(EmailClient)
        client.fail = True
        alice = await make_user(user_repo, "Alice")

        outcome = await service.invite_by_email(alice.id, Email("bob@example.com"))
        await email_service.drain()

        assert outcome.email_sent is True
        stored = await invitation_repo.find_by_token(outcome.invitation.token)
        assert stored is not None
        assert stored.is_pending

    @pytest.mark.asyncio
    async def test_partnered_sender_cannot_invite(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        partnership_service = await unit_env.get(PartnershipService)
        alice = await make_user(user_repo, "Alice")
        bob = await make_user(user_repo, "Bob")
        await partnership_service.create_partnership(alice.id, bob.id)

        with pytest.raises(AlreadyPartneredError):
            await service.invite_by_email(alice.id, Email("carol@example.com"))

    @pytest.mark.asyncio
    async def test_registered_email_is_rejected(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        alice = await make_user(user_repo, "Alice")
        await make_user(user_repo, "Bob", email="bob@example.com")

        with pytest.raises(EmailTakenError):
            await service.invite_by_email(alice.id, Email("BOB@example.com"))

    @pytest.mark.asyncio
    async def test_unknown_sender(self, unit_env):
        service = await unit_env.get(InvitationService)

        with pytest.raises(NotFoundError):
            await service.invite_by_email(UserId(uuid4()), Email("bob@example.com"))


class TestListInvitations:
    """Tests for list_invitations."""

    @pytest.mark.asyncio
    async def test_filters_by_status(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        alice = await make_user(user_repo, "Alice")
        accepted = await service.invite_by_email(alice.id, Email("bob@example.com"))
        pending = await service.invite_by_email(alice.id, Email("carol@example.com"))
        bob = await make_user(user_repo, "Bob", email="bob@example.com")
        await service.redeem_invitation(bob, accepted.invitation.token)

        everything = await service.list_invitations(alice.id)
        only_pending = await service.list_invitations(
            alice.id, InvitationStatus.PENDING
        )

        assert len(everything) == 2
        assert [i.id for i in only_pending] == [pending.invitation.id]


class TestRedeemInvitation:
    """Tests for redeem_invitation."""

    @pytest.mark.asyncio
    async def test_matching_registration_creates_partnership(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        partnership_service = await unit_env.get(PartnershipService)
        alice = await make_user(user_repo, "Alice")
        outcome = await service.invite_by_email(alice.id, Email("bob@example.com"))
        bob = await make_user(user_repo, "Bob", email="bob@example.com")

        partnership = await service.redeem_invitation(bob, outcome.invitation.token)

        assert partnership is not None
        assert await partnership_service.get_partner(bob.id) == alice.id

        invitation = await service.get_invitation_by_token(outcome.invitation.token)
        assert invitation.status == InvitationStatus.ACCEPTED
        assert invitation.accepted_at is not None
        assert invitation.accepted_by_user_id == bob.id

    @pytest.mark.asyncio
    async def test_email_mismatch_leaves_invitation_pending(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        partnership_service = await unit_env.get(PartnershipService)
        alice = await make_user(user_repo, "Alice")
        outcome = await service.invite_by_email(alice.id, Email("bob@example.com"))
        mallory = await make_user(user_repo, "Mallory", email="mallory@example.com")

        result = await service.redeem_invitation(mallory, outcome.invitation.token)

        assert result is None
        assert not await partnership_service.has_partner(alice.id)
        invitation = await service.get_invitation_by_token(outcome.invitation.token)
        assert invitation.is_pending

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        bob = await make_user(user_repo, "Bob")

        result = await service.redeem_invitation(bob, InvitationToken("abc123"))

        assert result is None

    @pytest.mark.asyncio
    async def test_accepted_invitation_cannot_be_reused(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        partnership_service = await unit_env.get(PartnershipService)
        alice = await make_user(user_repo, "Alice")
        outcome = await service.invite_by_email(alice.id, Email("bob@example.com"))
        bob = await make_user(user_repo, "Bob", email="bob@example.com")
        await service.redeem_invitation(bob, outcome.invitation.token)
        await partnership_service.unmatch(bob.id)

        result = await service.redeem_invitation(bob, outcome.invitation.token)

        assert result is None
        assert not await partnership_service.has_partner(bob.id)

    @pytest.mark.asyncio
    async def test_inviter_partnered_meanwhile(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        service = await unit_env.get(InvitationService)
        partnership_service = await unit_env.get(PartnershipService)
        alice = await make_user(user_repo, "Alice")
        carol = await make_user(user_repo, "Carol")
        outcome = await service.invite_by_email(alice.id, Email("bob@example.com"))
        await partnership_service.create_partnership(alice.id, carol.id)
        bob = await make_user(user_repo, "Bob", email="bob@example.com")

        result = await service.redeem_invitation(bob, outcome.invitation.token)

        assert result is None
        assert not await partnership_service.has_partner(bob.id)
        invitation = await service.get_invitation_by_token(outcome.invitation.token)
        assert invitation.is_pending
