"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel

from wingman.application.usecase.auth import (
    ForgotPasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    ResetPasswordUseCase,
)
from wingman.application.usecase.auth.forgot_password import (
    ForgotPasswordRequest,
    ForgotPasswordResponse,
)
from wingman.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from wingman.application.usecase.auth.login import LoginRequest, LoginResponse
from wingman.application.usecase.auth.register import (
    RegisterRequest,
    RegisterResponse,
)
from wingman.application.usecase.auth.reset_password import (
    ResetPasswordRequest,
    ResetPasswordResponse,
)
from wingman.config import Settings
from wingman.domain.error import NotFoundError
from wingman.domain.service import JWTService
from wingman.interface.api.dependencies import (
    clear_auth_cookie,
    extract_token,
    set_auth_cookie,
)
from wingman.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> RegisterResponse:
    """Create an account and log the new user in.

    When an invite token is supplied and still valid, the new user is
    partnered with the inviter straight away.

    Example:
        POST /auth/register
        {
            "name": "Alice",
            "email": "alice@example.com",
            "password": "correct horse",
            "bio": "Marathons and board games",
            "invite_token": "3f9c..."
        }
    """
    result = await register_use_case.execute(body)

    logger.info(
        f"Registered user {result.user.id}, "
        f"partnership_created={result.partnership_created}"
    )
    set_auth_cookie(
        response,
        result.token,
        settings.auth,
        secure=settings.environment == "production",
    )
    return result


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in with email and password.

    Sets the auth cookie and also returns the token for clients that
    prefer an Authorization header.
    """
    result = await login_use_case.execute(body)

    set_auth_cookie(
        response,
        result.token,
        settings.auth,
        secure=settings.environment == "production",
    )
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    clear_auth_cookie(response, settings.auth)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    This endpoint is safe to call without authentication - it will return
    authenticated=false instead of raising an error.
    """
    token = extract_token(request, settings.auth)
    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        payload = jwt_service.verify_token(token)
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=payload.user_id)
        )
        return AuthStatusResponse(authenticated=True, user=user)

    except JWTError:
        # Invalid or expired token
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # JWT valid but user no longer exists
        return AuthStatusResponse(authenticated=False)


@router.post("/forgot-password", response_model=ForgotPasswordResponse)
async def forgot_password(
    body: ForgotPasswordRequest,
    forgot_password_use_case: FromDishka[ForgotPasswordUseCase],
) -> ForgotPasswordResponse:
    """Email a password reset link.

    Answers the same way whether or not the email belongs to an account.

    Example:
        POST /auth/forgot-password
        {"email": "alice@example.com"}
    """
    return await forgot_password_use_case.execute(body)


@router.post("/reset-password", response_model=ResetPasswordResponse)
async def reset_password(
    body: ResetPasswordRequest,
    reset_password_use_case: FromDishka[ResetPasswordUseCase],
) -> ResetPasswordResponse:
    """Set a new password with the token from a reset link.

    The token stops working once used. Existing JWTs stay valid until they
    expire.

    Example:
        POST /auth/reset-password
        {"token": "9b1e...", "new_password": "a new passphrase"}
    """
    return await reset_password_use_case.execute(body)
