"""Login use case."""

import logfire
from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_value
from wingman.application.usecase.common import AccountInfo
from wingman.domain.error import InvalidCredentialsError, ValidationError
from wingman.domain.service import JWTService, UserService
from wingman.domain.value import Email


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    user: AccountInfo
    token: str


class LoginUseCase(BaseUseCase):
    """Use case for email and password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a JWT.

        Raises:
            InvalidCredentialsError: If the email or password is wrong
        """
        with logfire.span("login.execute"):
            try:
                email = parse_value(Email, request.email)
            except ValidationError:
                raise InvalidCredentialsError()

            user = await self.user_service.authenticate(email, request.password)
            token = self.jwt_service.create_token(str(user.id), user.email.root)
            return LoginResponse(user=AccountInfo.from_user(user), token=token)
