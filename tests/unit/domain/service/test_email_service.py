"""Unit tests for EmailService."""

import pytest

from wingman.adapter.smtp import MockEmailClient
from wingman.domain.service import EmailService
from wingman.domain.service.email_service import (
    build_invitation_email,
    build_password_reset_email,
)


def _message():
    return build_invitation_email(
        "bob@example.com", "Alice", "http://localhost:3000/register?inviteToken=ab"
    )


class TestEmailService:
    """Tests for background email delivery."""

    @pytest.mark.asyncio
    async def test_send_in_background_delivers(self):
        client = MockEmailClient()
        service = EmailService(client)

        scheduled = service.send_in_background(_message())
        await service.drain()

        assert scheduled is True
        assert [m.to for m in client.outbox] == ["bob@example.com"]

    @pytest.mark.asyncio
    async def test_unconfigured_client_skips_send(self):
        client = MockEmailClient(configured=False)
        service = EmailService(client)

        assert service.is_configured is False
        assert service.send_in_background(_message()) is False
        await service.drain()
        assert client.outbox == []

    @pytest.mark.asyncio
    async def test_failure_is_swallowed(self):
        client = MockEmailClient(fail=True)
        service = EmailService(client)

        assert service.send_in_background(_message()) is True
        # Must not raise
        await service.drain()
        assert client.outbox == []

    @pytest.mark.asyncio
    async def test_drain_with_nothing_scheduled(self):
        service = EmailService(MockEmailClient())
        await service.drain()


class TestInvitationEmail:
    """Tests for the invitation email content."""

    def test_subject_names_the_inviter(self):
        message = _message()
        assert message.subject == "Alice wants you as their Wingman partner!"

    def test_both_bodies_carry_the_link(self):
        message = _message()
        link = "http://localhost:3000/register?inviteToken=ab"
        assert link in message.text
        assert link in message.html

    def test_inviter_name_is_escaped_in_html(self):
        message = build_invitation_email(
            "bob@example.com",
            "<script>alert(1)</script>",
            "http://localhost:3000/register?inviteToken=ab&x=1",
        )

        assert "<script>" not in message.html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in message.html
        assert "inviteToken=ab&amp;x=1" in message.html
        # Plain text is not HTML
        assert "<script>alert(1)</script>" in message.subject
        assert "<script>alert(1)</script>" in message.text


class TestPasswordResetEmail:
    """Tests for the password reset email content."""

    def test_content(self):
        url = "http://localhost:3000/reset-password?token=cd"
        message = build_password_reset_email("alice@example.com", "Alice", url, 60)

        assert message.subject == "Reset Your Wingman Password"
        assert url in message.text
        assert url in message.html
        assert "60 minutes" in message.text

    def test_name_is_escaped_in_html(self):
        message = build_password_reset_email(
            "alice@example.com", "Al <b>ice</b>", "http://x/reset-password?token=cd", 60
        )

        assert "<b>" not in message.html
        assert "Al &lt;b&gt;ice&lt;/b&gt;" in message.html
