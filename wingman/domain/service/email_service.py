"""Email domain service.

Invitation and password reset emails are sent in the background: the caller
gets a response as soon as the invitation or reset token is stored, and a
failed delivery is logged without affecting it.
"""

import asyncio
from abc import ABC, abstractmethod
from html import escape

import logfire

from wingman.domain.value.common import ValueObject

from .base import Service


class EmailMessage(ValueObject):
    """A multipart email with plain text and HTML bodies."""

    to: str
    subject: str
    text: str
    html: str


class EmailClient(ABC):
    """Outbound email transport."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the transport has the settings it needs to send."""
        pass

    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        """Deliver a message.

        Args:
            message: Message to send

        Raises:
            EmailDeliveryError: If the transport rejects or cannot reach the server
        """
        pass


def build_invitation_email(
    to: str, inviter_name: str, invitation_url: str
) -> EmailMessage:
    """Compose the partner invitation email.

    Interpolated values are HTML-escaped in the HTML body.
    """
    subject = f"{inviter_name} wants you as their Wingman partner!"
    text = (
        "Hi there!\n\n"
        f"{inviter_name} wants you to be their accountability partner on Wingman.\n\n"
        "Wingman is a weekly goal-tracking app where partners support each other "
        "to stay motivated and achieve their goals together.\n\n"
        f"Join and automatically become partners with {inviter_name}:\n"
        f"{invitation_url}\n\n"
        "- The Wingman Team"
    )
    safe_name = escape(inviter_name)
    safe_url = escape(invitation_url)
    html = f"""
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; color: #333;">
  <h1 style="text-align: center;">You've Been Invited to Wingman!</h1>
  <p>Hi there!</p>
  <p><strong>{safe_name}</strong> wants you to be their accountability partner on Wingman.</p>
  <p>Wingman is a weekly goal-tracking app where partners support each other to stay
  motivated and achieve their goals together.</p>
  <p style="text-align: center;">
    <a href="{safe_url}" style="display: inline-block; padding: 15px 30px; background: #667eea; color: white; text-decoration: none; border-radius: 5px; font-weight: bold;">Accept Invitation &amp; Join Wingman</a>
  </p>
  <p style="font-size: 12px; color: #666;">
    Or copy and paste this link into your browser:<br>
    <a href="{safe_url}">{safe_url}</a>
  </p>
  <p>- The Wingman Team</p>
</body>
</html>
"""
    return EmailMessage(to=to, subject=subject, text=text, html=html)


def build_password_reset_email(
    to: str, user_name: str, reset_url: str, expiry_minutes: int
) -> EmailMessage:
    """Compose the password reset email."""
    subject = "Reset Your Wingman Password"
    text = (
        f"Hi {user_name},\n\n"
        "We received a request to reset your Wingman password. "
        "Open this link to choose a new one:\n"
        f"{reset_url}\n\n"
        f"The link expires in {expiry_minutes} minutes. If you didn't ask for "
        "a reset, you can ignore this email and your password will stay the same.\n\n"
        "- The Wingman Team"
    )
    safe_name = escape(user_name)
    safe_url = escape(reset_url)
    html = f"""
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; color: #333;">
  <h1 style="text-align: center;">Reset Your Password</h1>
  <p>Hi {safe_name},</p>
  <p>We received a request to reset your Wingman password.</p>
  <p style="text-align: center;">
    <a href="{safe_url}" style="display: inline-block; padding: 15px 30px; background: #667eea; color: white; text-decoration: none; border-radius: 5px; font-weight: bold;">Reset Password</a>
  </p>
  <p style="font-size: 12px; color: #666;">
    Or copy and paste this link into your browser:<br>
    <a href="{safe_url}">{safe_url}</a>
  </p>
  <p>This link expires in {expiry_minutes} minutes. If you didn't ask for a reset,
  you can ignore this email.</p>
  <p>- The Wingman Team</p>
</body>
</html>
"""
    return EmailMessage(to=to, subject=subject, text=text, html=html)


class EmailService(Service):
    """Schedules outbound email on background tasks."""

    def __init__(self, client: EmailClient) -> None:
        """Initialize email service.

        Args:
            client: Email transport
        """
        self.client = client
        self._tasks: set[asyncio.Task] = set()

    @property
    def is_configured(self) -> bool:
        return self.client.is_configured

    def send_in_background(self, message: EmailMessage) -> bool:
        """Schedule a message for delivery without waiting for it.

        Args:
            message: Message to send

        Returns:
            True if a send was scheduled, False if email is not configured
        """
        if not self.client.is_configured:
            logfire.info("Email not configured, skipping send", subject=message.subject)
            return False

        task = asyncio.create_task(self._deliver(message))
        # Keep a strong reference until the task finishes
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return True

    async def _deliver(self, message: EmailMessage) -> None:
        with logfire.span("email_service.deliver", subject=message.subject):
            try:
                await self.client.send(message)
            except Exception as e:
                logfire.error(
                    "Email delivery failed", subject=message.subject, error=str(e)
                )
                return
            logfire.info("Email delivered", subject=message.subject)

    async def drain(self) -> None:
        """Wait for all scheduled sends to finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks))
