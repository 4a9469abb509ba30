"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from wingman.application.usecase.auth import GetCurrentUserUseCase
from wingman.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from wingman.application.usecase.common import AccountInfo
from wingman.application.usecase.user import UpdateUserProfileUseCase
from wingman.application.usecase.user.update_user_profile import (
    UpdateUserProfileRequest,
)
from wingman.config import Settings
from wingman.domain.service import JWTService
from wingman.interface.api.dependencies import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating user profile.

    Omitted fields are left unchanged; an empty bio clears it.
    """

    name: str | None = None
    bio: str | None = None


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_my_profile(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> GetCurrentUserResponse:
    """Get the authenticated user's account and current partner.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the account is gone
    """
    user_id = require_user_id(request, jwt_service, settings.auth)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )


@router.patch("/me", response_model=AccountInfo)
async def update_my_profile(
    body: UpdateUserProfileAPIRequest,
    request: Request,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> AccountInfo:
    """Update the authenticated user's name and/or bio.

    Example:
        PATCH /users/me
        {
            "bio": "Climbing, jazz and terrible puns"
        }
    """
    user_id = require_user_id(request, jwt_service, settings.auth)
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(user_id=user_id, name=body.name, bio=body.bio)
    )
