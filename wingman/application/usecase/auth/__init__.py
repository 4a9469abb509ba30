"""Authentication use cases."""

from .forgot_password import ForgotPasswordUseCase
from .get_current_user import GetCurrentUserUseCase
from .login import LoginUseCase
from .register import RegisterUseCase
from .reset_password import ResetPasswordUseCase

__all__ = [
    "ForgotPasswordUseCase",
    "GetCurrentUserUseCase",
    "LoginUseCase",
    "RegisterUseCase",
    "ResetPasswordUseCase",
]
