"""User use cases."""

from .update_user_profile import UpdateUserProfileUseCase

__all__ = ["UpdateUserProfileUseCase"]
