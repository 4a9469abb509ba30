"""Unit tests for ForgotPasswordUseCase and ResetPasswordUseCase."""

import pytest

from wingman.application.usecase.auth import (
    ForgotPasswordUseCase,
    LoginUseCase,
    ResetPasswordUseCase,
)
from wingman.application.usecase.auth.forgot_password import (
    RESET_REQUESTED_MESSAGE,
    ForgotPasswordRequest,
)
from wingman.application.usecase.auth.login import LoginRequest
from wingman.application.usecase.auth.reset_password import ResetPasswordRequest
from wingman.domain.error import (
    InvalidCredentialsError,
    InvalidResetTokenError,
    ValidationError,
)
from wingman.domain.repository import UserRepository
from wingman.domain.service import PasswordResetService
from wingman.domain.value import Email
from tests.factories import TEST_PASSWORD, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestForgotPasswordUseCase:
    """Tests for ForgotPasswordUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email", ["alice@example.com", "nobody@example.com", "not an email"]
    )
    async def test_same_answer_for_any_email(self, unit_env, email):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(ForgotPasswordUseCase)
        await make_user(user_repo, "Alice", email="alice@example.com")

        response = await use_case.execute(ForgotPasswordRequest(email=email))

        assert response.message == RESET_REQUESTED_MESSAGE

    @pytest.mark.asyncio
    async def test_issues_token_for_known_email(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(ForgotPasswordUseCase)
        alice = await make_user(user_repo, "Alice", email="alice@example.com")

        await use_case.execute(ForgotPasswordRequest(email="alice@example.com"))

        stored = await user_repo.find_by_id(alice.id)
        assert stored.reset_token_hash is not None

    @pytest.mark.asyncio
    async def test_blank_email_rejected(self, unit_env):
        use_case = await unit_env.get(ForgotPasswordUseCase)

        with pytest.raises(ValidationError, match="Email is required"):
            await use_case.execute(ForgotPasswordRequest(email="  "))


class TestResetPasswordUseCase:
    """Tests for ResetPasswordUseCase."""

    @pytest.mark.asyncio
    async def test_new_password_logs_in(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        reset_service = await unit_env.get(PasswordResetService)
        use_case = await unit_env.get(ResetPasswordUseCase)
        login = await unit_env.get(LoginUseCase)
        await make_user(user_repo, "Alice", email="alice@example.com")
        token = await reset_service.request_reset(Email("alice@example.com"))

        await use_case.execute(
            ResetPasswordRequest(token=token, new_password="brand new password")
        )

        response = await login.execute(
            LoginRequest(email="alice@example.com", password="brand new password")
        )
        assert response.user.email == "alice@example.com"
        with pytest.raises(InvalidCredentialsError):
            await login.execute(
                LoginRequest(email="alice@example.com", password=TEST_PASSWORD)
            )

    @pytest.mark.asyncio
    async def test_short_password_keeps_token(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        reset_service = await unit_env.get(PasswordResetService)
        use_case = await unit_env.get(ResetPasswordUseCase)
        alice = await make_user(user_repo, "Alice", email="alice@example.com")
        token = await reset_service.request_reset(Email("alice@example.com"))

        with pytest.raises(ValidationError, match="at least 8"):
            await use_case.execute(
                ResetPasswordRequest(token=token, new_password="short")
            )

        stored = await user_repo.find_by_id(alice.id)
        assert stored.reset_token_hash is not None

    @pytest.mark.asyncio
    async def test_empty_token_rejected(self, unit_env):
        use_case = await unit_env.get(ResetPasswordUseCase)

        with pytest.raises(InvalidResetTokenError):
            await use_case.execute(
                ResetPasswordRequest(token="", new_password="brand new password")
            )
