"""Email infrastructure providers."""

from dishka import Scope, provide

from wingman.adapter.smtp.client import RealSMTPEmailClient
from wingman.config import EmailSettings
from wingman.domain.service.email_service import EmailClient
from wingman.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_client(self, settings: EmailSettings) -> EmailClient:
        """Provide SMTP email client.

        An unconfigured client is still provided; invitations then return
        their link without sending.
        """
        return RealSMTPEmailClient(settings)
