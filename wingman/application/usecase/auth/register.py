"""Register use case."""

import logfire
from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_value
from wingman.application.usecase.common import AccountInfo, UserInfo
from wingman.config import Settings
from wingman.domain.error import ValidationError
from wingman.domain.service import InvitationService, JWTService, UserService
from wingman.domain.value import Bio, DisplayName, Email, InvitationToken


class RegisterRequest(BaseModel):
    """Register request."""

    name: str
    email: str
    password: str
    bio: str | None = None
    invite_token: str | None = None


class RegisterResponse(BaseModel):
    """Register response."""

    user: AccountInfo
    token: str
    partnership_created: bool
    partner: UserInfo | None = None


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account, optionally through an invitation.

    When the registrant arrives with a valid invitation for their email, the
    user, the partnership and the accepted invitation are written in the
    same transaction.
    """

    def __init__(
        self,
        user_service: UserService,
        invitation_service: InvitationService,
        jwt_service: JWTService,
        settings: Settings,
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            invitation_service: Invitation domain service
            jwt_service: JWT token domain service
            settings: Application settings
        """
        self.user_service = user_service
        self.invitation_service = invitation_service
        self.jwt_service = jwt_service
        self.settings = settings

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Steps:
        1. Validate name, email, password and bio
        2. Create the user (email must be unused)
        3. Redeem the invitation token, if any
        4. Issue a JWT

        Args:
            request: Registration details

        Returns:
            The new account, its token and the partnership outcome

        Raises:
            ValidationError: If any field is invalid
            EmailTakenError: If the email is already registered
        """
        name = parse_value(DisplayName, request.name)
        email = parse_value(Email, request.email)
        bio = parse_value(Bio, request.bio) if request.bio is not None else None
        if len(request.password) < self.settings.auth.password_min_length:
            raise ValidationError(
                f"Password must be at least "
                f"{self.settings.auth.password_min_length} characters"
            )

        with logfire.span(
            "register.execute", has_invite=request.invite_token is not None
        ):
            user = await self.user_service.register(
                name=name, email=email, password=request.password, bio=bio
            )

            partner = None
            if request.invite_token:
                token = self._parse_token(request.invite_token)
                partnership = (
                    await self.invitation_service.redeem_invitation(user, token)
                    if token
                    else None
                )
                if partnership:
                    partner = await self.user_service.get_by_id(
                        partnership.partner_of(user.id)
                    )

            jwt_token = self.jwt_service.create_token(str(user.id), user.email.root)

            return RegisterResponse(
                user=AccountInfo.from_user(user),
                token=jwt_token,
                partnership_created=partner is not None,
                partner=UserInfo.from_user(partner) if partner else None,
            )

    @staticmethod
    def _parse_token(raw: str) -> InvitationToken | None:
        # A malformed token is treated like an unknown one
        try:
            return parse_value(InvitationToken, raw)
        except ValidationError:
            logfire.warn("Malformed invitation token at registration")
            return None
