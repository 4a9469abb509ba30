"""Application layer DI providers."""

from dishka import Scope, provide

from wingman.application.usecase.auth import (
    ForgotPasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    ResetPasswordUseCase,
)
from wingman.application.usecase.invitation import (
    InviteByEmailUseCase,
    ListInvitationsUseCase,
    ValidateInvitationUseCase,
)
from wingman.application.usecase.match import (
    AcceptRequestUseCase,
    GetSuggestionsUseCase,
    ListRequestsUseCase,
    RejectRequestUseCase,
    SendRequestUseCase,
    UnmatchUseCase,
)
from wingman.application.usecase.user import UpdateUserProfileUseCase
from wingman.config import Settings
from wingman.domain.service import (
    InvitationService,
    JWTService,
    MatchService,
    PartnershipService,
    PasswordResetService,
    UserService,
)
from wingman.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        user_service: UserService,
        invitation_service: InvitationService,
        jwt_service: JWTService,
        settings: Settings,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            user_service=user_service,
            invitation_service=invitation_service,
            jwt_service=jwt_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService, partnership_service: PartnershipService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            user_service=user_service, partnership_service=partnership_service
        )

    @provide(scope=Scope.REQUEST)
    def get_forgot_password_use_case(
        self, password_reset_service: PasswordResetService
    ) -> ForgotPasswordUseCase:
        """Provide forgot password use case."""
        return ForgotPasswordUseCase(password_reset_service=password_reset_service)

    @provide(scope=Scope.REQUEST)
    def get_reset_password_use_case(
        self, password_reset_service: PasswordResetService, settings: Settings
    ) -> ResetPasswordUseCase:
        """Provide reset password use case."""
        return ResetPasswordUseCase(
            password_reset_service=password_reset_service, settings=settings
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    # Match use cases
    @provide(scope=Scope.REQUEST)
    def get_suggestions_use_case(
        self, match_service: MatchService
    ) -> GetSuggestionsUseCase:
        """Provide get suggestions use case."""
        return GetSuggestionsUseCase(match_service=match_service)

    @provide(scope=Scope.REQUEST)
    def get_send_request_use_case(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> SendRequestUseCase:
        """Provide send request use case."""
        return SendRequestUseCase(
            partnership_service=partnership_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_requests_use_case(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> ListRequestsUseCase:
        """Provide list requests use case."""
        return ListRequestsUseCase(
            partnership_service=partnership_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_request_use_case(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> AcceptRequestUseCase:
        """Provide accept request use case."""
        return AcceptRequestUseCase(
            partnership_service=partnership_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_reject_request_use_case(
        self, partnership_service: PartnershipService
    ) -> RejectRequestUseCase:
        """Provide reject request use case."""
        return RejectRequestUseCase(partnership_service=partnership_service)

    @provide(scope=Scope.REQUEST)
    def get_unmatch_use_case(
        self, partnership_service: PartnershipService
    ) -> UnmatchUseCase:
        """Provide unmatch use case."""
        return UnmatchUseCase(partnership_service=partnership_service)

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_invite_by_email_use_case(
        self, invitation_service: InvitationService
    ) -> InviteByEmailUseCase:
        """Provide invite by email use case."""
        return InviteByEmailUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_validate_invitation_use_case(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> ValidateInvitationUseCase:
        """Provide validate invitation use case."""
        return ValidateInvitationUseCase(
            invitation_service=invitation_service, user_service=user_service
        )
