"""Password reset domain service.

A reset issues a random token, stores only its SHA-256 digest on the user
and emails the plain token inside a link. Presenting the token before it
expires sets a new password and clears the token, so each link works once.
"""

import hashlib
import secrets
from datetime import datetime, timedelta, timezone

import logfire

from wingman.config import Settings
from wingman.domain.error import InvalidResetTokenError
from wingman.domain.model import User
from wingman.domain.repository import UserRepository
from wingman.domain.value import Email
from wingman.util.password import hash_password

from .base import Service
from .email_service import EmailService, build_password_reset_email


def hash_reset_token(token: str) -> str:
    """SHA-256 hex digest under which a reset token is stored."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class PasswordResetService(Service):
    """Domain service for forgotten passwords."""

    def __init__(
        self,
        user_repository: UserRepository,
        email_service: EmailService,
        settings: Settings,
    ) -> None:
        """Initialize password reset service.

        Args:
            user_repository: User repository
            email_service: Background email sender
            settings: Application settings (frontend URL, token size, expiry)
        """
        self.user_repository = user_repository
        self.email_service = email_service
        self.settings = settings

    def reset_url(self, token: str) -> str:
        """Frontend link carrying the reset token."""
        return f"{self.settings.api.frontend_url}/reset-password?token={token}"

    async def request_reset(self, email: Email) -> str | None:
        """Issue a reset token for the account with this email and mail the link.

        A second request replaces any outstanding token.

        Args:
            email: Address the user typed in

        Returns:
            The plain token, or None when no account has this email. Callers
            facing the public must answer identically in both cases.
        """
        with logfire.span("password_reset_service.request_reset"):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.info("Password reset requested for unknown email")
                return None

            auth = self.settings.auth
            token = secrets.token_hex(auth.reset_token_bytes)
            expires_at = datetime.now(timezone.utc) + timedelta(
                minutes=auth.password_reset_expiry_minutes
            )
            await self.user_repository.save(
                user.model_copy(
                    update={
                        "reset_token_hash": hash_reset_token(token),
                        "reset_token_expires_at": expires_at,
                    }
                )
            )

            email_sent = self.email_service.send_in_background(
                build_password_reset_email(
                    user.email.root,
                    user.name.root,
                    self.reset_url(token),
                    auth.password_reset_expiry_minutes,
                )
            )
            logfire.info(
                "Password reset token issued",
                user_id=str(user.id),
                email_sent=email_sent,
            )
            return token

    async def reset_password(self, token: str, new_password: str) -> User:
        """Set a new password using an outstanding reset token.

        The user row is locked and re-read before the token is checked, so
        two requests racing with the same token cannot both succeed.

        Args:
            token: Plain token from the reset link
            new_password: Replacement password, already length-checked

        Returns:
            The updated user, with the token cleared

        Raises:
            InvalidResetTokenError: If the token is unknown, used or expired
        """
        with logfire.span("password_reset_service.reset_password"):
            token_hash = hash_reset_token(token)
            user = await self.user_repository.find_by_reset_token_hash(token_hash)
            if not user:
                logfire.warn("Unknown password reset token")
                raise InvalidResetTokenError()

            await self.user_repository.lock([user.id])
            user = await self.user_repository.find_by_id(user.id)
            if not user or not user.has_valid_reset_token(
                token_hash, datetime.now(timezone.utc)
            ):
                logfire.warn("Expired or already used password reset token")
                raise InvalidResetTokenError()

            saved = await self.user_repository.save(
                user.model_copy(
                    update={
                        "password_hash": hash_password(new_password),
                        "reset_token_hash": None,
                        "reset_token_expires_at": None,
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info("Password reset", user_id=str(saved.id))
            return saved
