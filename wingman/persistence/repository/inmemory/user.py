"""In-memory user repository for testing."""

import asyncio
from typing import Optional

from sqlalchemy.exc import IntegrityError

from wingman.domain.model.user import User
from wingman.domain.repository.partnership import PartnershipRepository
from wingman.domain.repository.user import UserRepository
from wingman.domain.value import Email, MatchCandidate, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Candidates' partners are looked up in the partnership repository,
    mirroring the join the PostgreSQL implementation performs.
    """

    def __init__(self, partnership_repository: PartnershipRepository) -> None:
        self._users: dict[UserId, User] = {}
        self._partnerships = partnership_repository

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_reset_token_hash(self, token_hash: str) -> Optional[User]:
        """Find the user holding a password reset token."""
        for user in self._users.values():
            if user.reset_token_hash == token_hash:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user already has this email
        """
        for other in self._users.values():
            if other.id != user.id and other.email == user.email:
                raise IntegrityError("Duplicate email", None, Exception())
        self._users[user.id] = user
        return user

    async def lock(self, user_ids: list[UserId]) -> None:
        """Yield to the event loop without locking anything.

        Concurrent callers interleave here the way they would while waiting
        on row locks. Nothing else in these repositories suspends, so the
        re-check and write that follow a lock run without interruption.
        """
        await asyncio.sleep(0)

    async def find_match_candidates(
        self, exclude_user_id: UserId, unpartnered_only: bool = True
    ) -> list[MatchCandidate]:
        """List other users with their partner, ordered by created_at then id."""
        candidates = []
        for user in sorted(
            self._users.values(), key=lambda u: (u.created_at, str(u.id))
        ):
            if user.id == exclude_user_id:
                continue
            partnership = await self._partnerships.find_by_user(user.id)
            partner_id = partnership.partner_of(user.id) if partnership else None
            if unpartnered_only and partner_id is not None:
                continue
            candidates.append(
                MatchCandidate(
                    user_id=user.id,
                    name=user.name.root,
                    bio=user.bio_text,
                    partner_id=partner_id,
                    created_at=user.created_at,
                )
            )
        return candidates

    async def find_all(self) -> list[User]:
        """List every user, oldest first."""
        return sorted(self._users.values(), key=lambda u: (u.created_at, str(u.id)))
