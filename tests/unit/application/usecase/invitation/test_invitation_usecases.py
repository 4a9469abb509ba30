"""Unit tests for the invitation use cases."""

import pytest

from wingman.application.usecase.invitation import (
    InviteByEmailUseCase,
    ListInvitationsUseCase,
    ValidateInvitationUseCase,
)
from wingman.application.usecase.invitation.invite_by_email import (
    InviteByEmailRequest,
)
from wingman.application.usecase.invitation.list_invitations import (
    ListInvitationsRequest,
)
from wingman.application.usecase.invitation.validate_invitation import (
    ValidateInvitationRequest,
)
from wingman.domain.error import ValidationError
from wingman.domain.repository import UserRepository
from wingman.domain.service import InvitationService
from wingman.domain.value import Email, InvitationStatus
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInviteByEmailUseCase:
    """Tests for InviteByEmailUseCase."""

    @pytest.mark.asyncio
    async def test_invite(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(InviteByEmailUseCase)
        alice = await make_user(user_repo, "Alice")

        response = await use_case.execute(
            InviteByEmailRequest(sender_id=str(alice.id), email=" Bob@Example.com")
        )

        assert response.email == "bob@example.com"
        assert "/register?inviteToken=" in response.invitation_url
        assert response.email_sent is True

    @pytest.mark.asyncio
    async def test_malformed_email(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(InviteByEmailUseCase)
        alice = await make_user(user_repo, "Alice")

        with pytest.raises(ValidationError, match="Invalid email format"):
            await use_case.execute(
                InviteByEmailRequest(sender_id=str(alice.id), email="bob at example")
            )


class TestListInvitationsUseCase:
    """Tests for ListInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_with_links(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        invite = await unit_env.get(InviteByEmailUseCase)
        use_case = await unit_env.get(ListInvitationsUseCase)
        alice = await make_user(user_repo, "Alice")
        created = await invite.execute(
            InviteByEmailRequest(sender_id=str(alice.id), email="bob@example.com")
        )

        response = await use_case.execute(
            ListInvitationsRequest(
                sender_id=str(alice.id), status=InvitationStatus.PENDING
            )
        )

        [listed] = response.invitations
        assert listed.id == created.invitation_id
        assert listed.invitation_url == created.invitation_url
        assert listed.accepted_at is None


class TestValidateInvitationUseCase:
    """Tests for ValidateInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_valid_token(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        invitation_service = await unit_env.get(InvitationService)
        use_case = await unit_env.get(ValidateInvitationUseCase)
        alice = await make_user(user_repo, "Alice")
        outcome = await invitation_service.invite_by_email(
            alice.id, Email("bob@example.com")
        )

        response = await use_case.execute(
            ValidateInvitationRequest(token=outcome.invitation.token.root)
        )

        assert response.valid is True
        assert response.status == InvitationStatus.PENDING
        assert response.email == "bob@example.com"
        assert response.inviter_name == "Alice"

    @pytest.mark.asyncio
    async def test_accepted_token(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        invitation_service = await unit_env.get(InvitationService)
        use_case = await unit_env.get(ValidateInvitationUseCase)
        alice = await make_user(user_repo, "Alice")
        outcome = await invitation_service.invite_by_email(
            alice.id, Email("bob@example.com")
        )
        bob = await make_user(user_repo, "Bob", email="bob@example.com")
        await invitation_service.redeem_invitation(bob, outcome.invitation.token)

        response = await use_case.execute(
            ValidateInvitationRequest(token=outcome.invitation.token.root)
        )

        assert response.valid is False
        assert response.status == InvitationStatus.ACCEPTED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["abcdef", "not hex at all"])
    async def test_unknown_or_malformed_token(self, unit_env, token):
        use_case = await unit_env.get(ValidateInvitationUseCase)

        response = await use_case.execute(ValidateInvitationRequest(token=token))

        assert response.valid is False
        assert response.message == "Invitation not found"
