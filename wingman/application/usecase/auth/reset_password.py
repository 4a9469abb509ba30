"""Reset password use case."""

import logfire
from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase
from wingman.config import Settings
from wingman.domain.error import InvalidResetTokenError, ValidationError
from wingman.domain.service import PasswordResetService


class ResetPasswordRequest(BaseModel):
    """Reset password request."""

    token: str
    new_password: str


class ResetPasswordResponse(BaseModel):
    """Reset password response."""

    message: str = "Password has been reset. You can now log in."


class ResetPasswordUseCase(BaseUseCase):
    """Use case for setting a new password from a reset link."""

    def __init__(
        self, password_reset_service: PasswordResetService, settings: Settings
    ) -> None:
        """Initialize reset password use case.

        Args:
            password_reset_service: Password reset domain service
            settings: Application settings
        """
        self.password_reset_service = password_reset_service
        self.settings = settings

    async def execute(self, request: ResetPasswordRequest) -> ResetPasswordResponse:
        """Replace the password of the account holding the token.

        Raises:
            ValidationError: If the new password is too short
            InvalidResetTokenError: If the token is unknown, used or expired
        """
        if not request.token:
            raise InvalidResetTokenError()
        min_length = self.settings.auth.password_min_length
        if len(request.new_password) < min_length:
            raise ValidationError(f"Password must be at least {min_length} characters")

        with logfire.span("reset_password.execute"):
            await self.password_reset_service.reset_password(
                request.token, request.new_password
            )
            return ResetPasswordResponse()
