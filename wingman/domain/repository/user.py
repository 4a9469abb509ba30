"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from wingman.domain.model.user import User
from wingman.domain.value import Email, MatchCandidate, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's normalized email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_reset_token_hash(self, token_hash: str) -> Optional[User]:
        """Find the user holding a password reset token.

        Args:
            token_hash: SHA-256 hex digest of the reset token

        Returns:
            The user if found, None otherwise. Expiry is not checked here.
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If another user already has this email
        """
        pass

    @abstractmethod
    async def lock(self, user_ids: list[UserId]) -> None:
        """Take row locks on the given users until the transaction ends.

        Locks are acquired in ascending id order so that two transactions
        locking the same pair cannot deadlock.

        Args:
            user_ids: Users to lock
        """
        pass

    @abstractmethod
    async def find_match_candidates(
        self, exclude_user_id: UserId, unpartnered_only: bool = True
    ) -> list[MatchCandidate]:
        """List users that could be suggested as partners.

        Args:
            exclude_user_id: The requesting user, never included
            unpartnered_only: Skip users that currently have a partner

        Returns:
            Candidates ordered by created_at, then id
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[User]:
        """List every user, oldest first.

        Returns:
            All users
        """
        pass
