"""SMTP email client.

smtplib is blocking, so each send runs in a worker thread.
"""

import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from wingman.adapter.error import EmailDeliveryError
from wingman.config import EmailSettings
from wingman.domain.service.email_service import EmailClient, EmailMessage
from wingman.util.logging import get_logger

logger = get_logger(__name__)


class RealSMTPEmailClient(EmailClient):
    """Sends email through an SMTP server using STARTTLS."""

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize SMTP client.

        Args:
            settings: SMTP host, credentials and sender identity
        """
        self.settings = settings

    @property
    def is_configured(self) -> bool:
        return self.settings.is_configured

    @property
    def from_address(self) -> str:
        return self.settings.from_address or self.settings.smtp_user or ""

    def _build_mime(self, message: EmailMessage) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = message.subject
        msg["From"] = f'"{self.settings.from_name}" <{self.from_address}>'
        msg["To"] = message.to
        msg.attach(MIMEText(message.text, "plain"))
        msg.attach(MIMEText(message.html, "html"))
        return msg

    def _send_sync(self, message: EmailMessage) -> None:
        msg = self._build_mime(message)
        try:
            with smtplib.SMTP(
                self.settings.smtp_host,
                self.settings.smtp_port,
                timeout=self.settings.timeout_seconds,
            ) as server:
                server.starttls()
                server.login(self.settings.smtp_user, self.settings.smtp_password or "")
                server.sendmail(self.from_address, [message.to], msg.as_string())
        except smtplib.SMTPAuthenticationError as e:
            logger.exception("SMTP login failed: %s", e)
            raise EmailDeliveryError("SMTP authentication failed") from e
        except (smtplib.SMTPException, OSError) as e:
            logger.exception("SMTP error (timeout or network): %s", e)
            raise EmailDeliveryError(str(e)) from e

    async def send(self, message: EmailMessage) -> None:
        """Send a message.

        Raises:
            EmailDeliveryError: If SMTP is not configured or the send fails
        """
        if not self.is_configured:
            raise EmailDeliveryError("SMTP not configured (smtp_host/smtp_user)")
        await asyncio.to_thread(self._send_sync, message)
        logger.info("Email sent: %s", message.subject)


class MockEmailClient(EmailClient):
    """Mock email client for testing.

    Records messages in ``outbox`` instead of sending them. Set ``fail`` to
    make every send raise.
    """

    def __init__(self, configured: bool = True, fail: bool = False) -> None:
        self.configured = configured
        self.fail = fail
        self.outbox: list[EmailMessage] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def send(self, message: EmailMessage) -> None:
        if self.fail:
            raise EmailDeliveryError("Mock delivery failure")
        self.outbox.append(message)
