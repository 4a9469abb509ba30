"""Forgot password use case."""

import logfire
from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_value
from wingman.domain.error import ValidationError
from wingman.domain.service import PasswordResetService
from wingman.domain.value import Email

RESET_REQUESTED_MESSAGE = "If that email exists, a password reset link has been sent."


class ForgotPasswordRequest(BaseModel):
    """Forgot password request."""

    email: str


class ForgotPasswordResponse(BaseModel):
    """Forgot password response, identical whether or not the email is known."""

    message: str = RESET_REQUESTED_MESSAGE


class ForgotPasswordUseCase(BaseUseCase):
    """Use case for requesting a password reset link."""

    def __init__(self, password_reset_service: PasswordResetService) -> None:
        """Initialize forgot password use case.

        Args:
            password_reset_service: Password reset domain service
        """
        self.password_reset_service = password_reset_service

    async def execute(self, request: ForgotPasswordRequest) -> ForgotPasswordResponse:
        """Email a reset link if the address belongs to an account.

        Raises:
            ValidationError: If the email is blank
        """
        if not request.email.strip():
            raise ValidationError("Email is required")

        with logfire.span("forgot_password.execute"):
            try:
                email = parse_value(Email, request.email)
            except ValidationError:
                # No account can have a malformed address
                return ForgotPasswordResponse()

            await self.password_reset_service.request_reset(email)
            return ForgotPasswordResponse()
