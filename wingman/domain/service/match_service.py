"""Partner suggestion service."""

import logfire

from wingman.config import MatchingSettings
from wingman.domain.error import AlreadyPartneredError
from wingman.domain.model import User
from wingman.domain.repository import PartnershipRepository, UserRepository
from wingman.domain.value import MatchCandidate, ScoredMatch, UserId

from .base import Service
from .compatibility_service import CompatibilityScorer
from .user_service import UserService


def find_top_matches(
    requester: User,
    candidates: list[MatchCandidate],
    top_n: int,
    scorer: CompatibilityScorer,
) -> list[ScoredMatch]:
    """Rank candidates by compatibility with the requester.

    The requester and anyone already partnered are skipped. Ties keep the
    candidates' input order.

    Args:
        requester: User asking for suggestions
        candidates: Possible partners, in a stable order
        top_n: Maximum number of matches to return
        scorer: Compatibility scorer

    Returns:
        Up to ``top_n`` matches, best first
    """
    scored = [
        ScoredMatch(
            user_id=candidate.user_id,
            name=candidate.name,
            bio=candidate.bio,
            member_since=candidate.created_at,
            compatibility_score=scorer.score(requester.bio_text, candidate.bio),
        )
        for candidate in candidates
        if candidate.user_id != requester.id and not candidate.has_partner
    ]
    # sorted() is stable, so equal scores keep input order
    ranked = sorted(scored, key=lambda match: match.compatibility_score, reverse=True)
    return ranked[: max(top_n, 0)]


class MatchService(Service):
    """Domain service for partner suggestions."""

    def __init__(
        self,
        user_service: UserService,
        user_repository: UserRepository,
        partnership_repository: PartnershipRepository,
        scorer: CompatibilityScorer,
        settings: MatchingSettings,
    ) -> None:
        """Initialize match service.

        Args:
            user_service: User domain service
            user_repository: User repository, source of candidates
            partnership_repository: Partnership repository
            scorer: Compatibility scorer
            settings: Matching settings
        """
        self.user_service = user_service
        self.user_repository = user_repository
        self.partnership_repository = partnership_repository
        self.scorer = scorer
        self.settings = settings

    async def suggest_partners(
        self, user_id: UserId, top_n: int | None = None
    ) -> list[ScoredMatch]:
        """Suggest the most compatible unpartnered users.

        Args:
            user_id: Requesting user
            top_n: Number of suggestions, defaults to the configured count

        Returns:
            Ranked suggestions, possibly empty

        Raises:
            NotFoundError: If the user does not exist
            AlreadyPartneredError: If the user already has a partner
        """
        count = top_n if top_n is not None else self.settings.suggestion_count
        with logfire.span(
            "match_service.suggest_partners", user_id=str(user_id), top_n=count
        ):
            requester = await self.user_service.get_by_id(user_id)

            if await self.partnership_repository.exists_for_user(user_id):
                raise AlreadyPartneredError(
                    str(user_id), "You already have a partner"
                )

            candidates = await self.user_repository.find_match_candidates(
                exclude_user_id=user_id, unpartnered_only=True
            )
            matches = find_top_matches(requester, candidates, count, self.scorer)
            logfire.info(
                "Partner suggestions computed",
                user_id=str(user_id),
                pool_size=len(candidates),
                returned=len(matches),
            )
            return matches
