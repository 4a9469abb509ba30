"""Domain layer DI providers."""

from dishka import Scope, provide

from wingman.config import AuthSettings, MatchingSettings, Settings
from wingman.domain.repository import (
    InvitationRepository,
    PartnershipRepository,
    PartnershipRequestRepository,
    UserRepository,
)
from wingman.domain.service import (
    CompatibilityScorer,
    EmailClient,
    EmailService,
    InvitationService,
    JWTService,
    MatchService,
    PartnershipService,
    PasswordResetService,
    UserService,
)
from wingman.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The scorer and email service hold no session and live for the app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_compatibility_scorer(
        self, settings: MatchingSettings
    ) -> CompatibilityScorer:
        """Provide compatibility scorer with a process-wide random generator."""
        return CompatibilityScorer(settings=settings)

    @provide(scope=Scope.APP)
    def get_email_service(self, client: EmailClient) -> EmailService:
        """Provide email service; it owns the background send tasks."""
        return EmailService(client=client)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_password_reset_service(
        self,
        user_repository: UserRepository,
        email_service: EmailService,
        settings: Settings,
    ) -> PasswordResetService:
        """Provide password reset domain service."""
        return PasswordResetService(
            user_repository=user_repository,
            email_service=email_service,
            settings=settings,
        )

    @provide
    def get_partnership_service(
        self,
        user_repository: UserRepository,
        partnership_repository: PartnershipRepository,
        request_repository: PartnershipRequestRepository,
    ) -> PartnershipService:
        """Provide partnership domain service."""
        return PartnershipService(
            user_repository=user_repository,
            partnership_repository=partnership_repository,
            request_repository=request_repository,
        )

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        user_repository: UserRepository,
        user_service: UserService,
        partnership_service: PartnershipService,
        email_service: EmailService,
        settings: Settings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            user_repository=user_repository,
            user_service=user_service,
            partnership_service=partnership_service,
            email_service=email_service,
            settings=settings,
        )

    @provide
    def get_match_service(
        self,
        user_service: UserService,
        user_repository: UserRepository,
        partnership_repository: PartnershipRepository,
        scorer: CompatibilityScorer,
        settings: MatchingSettings,
    ) -> MatchService:
        """Provide match domain service."""
        return MatchService(
            user_service=user_service,
            user_repository=user_repository,
            partnership_repository=partnership_repository,
            scorer=scorer,
            settings=settings,
        )
