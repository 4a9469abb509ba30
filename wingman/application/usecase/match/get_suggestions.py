"""Get partner suggestions use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from wingman.application.usecase.base import BaseUseCase, parse_uuid
from wingman.domain.service import MatchService
from wingman.domain.value import UserId


class GetSuggestionsRequest(BaseModel):
    """Get suggestions request."""

    user_id: str
    limit: int | None = Field(default=None, ge=1, le=50)


class SuggestionInfo(BaseModel):
    """A suggested partner."""

    id: str
    name: str
    bio: str | None
    compatibility_score: int
    member_since: datetime


class GetSuggestionsResponse(BaseModel):
    """Get suggestions response."""

    matches: list[SuggestionInfo]


class GetSuggestionsUseCase(BaseUseCase):
    """Use case for ranking the most compatible available partners."""

    def __init__(self, match_service: MatchService) -> None:
        """Initialize get suggestions use case.

        Args:
            match_service: Match domain service
        """
        self.match_service = match_service

    async def execute(self, request: GetSuggestionsRequest) -> GetSuggestionsResponse:
        """Return ranked suggestions; an empty pool yields an empty list.

        Raises:
            AlreadyPartneredError: If the user already has a partner
        """
        user_id = UserId(parse_uuid(request.user_id, "user id"))
        matches = await self.match_service.suggest_partners(user_id, request.limit)
        return GetSuggestionsResponse(
            matches=[
                SuggestionInfo(
                    id=str(match.user_id),
                    name=match.name,
                    bio=match.bio,
                    compatibility_score=match.compatibility_score,
                    member_since=match.member_since,
                )
                for match in matches
            ]
        )
