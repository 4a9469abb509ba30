"""Domain services."""

from .base import Service
from .compatibility_service import (
    KEYWORD_CATEGORIES,
    CompatibilityScorer,
    category_score,
    extract_categories,
    word_overlap_score,
)
from .email_service import EmailClient, EmailMessage, EmailService
from .invitation_service import InvitationOutcome, InvitationService
from .jwt_service import JWTService
from .match_service import MatchService, find_top_matches
from .partnership_service import PartnershipService
from .password_reset_service import PasswordResetService, hash_reset_token
from .user_service import UserService

__all__ = [
    "KEYWORD_CATEGORIES",
    "CompatibilityScorer",
    "EmailClient",
    "EmailMessage",
    "EmailService",
    "InvitationOutcome",
    "InvitationService",
    "JWTService",
    "MatchService",
    "PartnershipService",
    "PasswordResetService",
    "Service",
    "UserService",
    "category_score",
    "extract_categories",
    "find_top_matches",
    "hash_reset_token",
    "word_overlap_score",
]
