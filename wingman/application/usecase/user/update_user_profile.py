"""Update user profile use case."""

from pydantic import BaseModel

from wingman.application.usecase.base import BaseUseCase, parse_uuid, parse_value
from wingman.application.usecase.common import AccountInfo
from wingman.domain.error import ValidationError
from wingman.domain.service import UserService
from wingman.domain.value import Bio, DisplayName, UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: str  # From authenticated user
    name: str | None = None
    bio: str | None = None


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for updating a user's profile.

    Users can change their name and bio. Email and password are not
    editable here. An empty bio clears it.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> AccountInfo:
        """Validate the changes and save them.

        Raises:
            ValidationError: If nothing to update or a field is invalid
            NotFoundError: If user not found
        """
        if request.name is None and request.bio is None:
            raise ValidationError("Nothing to update")

        user_id = UserId(parse_uuid(request.user_id, "user id"))
        name = (
            parse_value(DisplayName, request.name)
            if request.name is not None
            else None
        )
        bio = parse_value(Bio, request.bio) if request.bio is not None else None

        saved = await self.user_service.update_profile(user_id, name=name, bio=bio)
        return AccountInfo.from_user(saved)
