"""Partnership repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from wingman.domain.model.partnership import Partnership
from wingman.domain.value import UserId


class PartnershipRepository(ABC):
    """Repository for Partnership entity.

    Defines the contract for partnership persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[Partnership]:
        """Find the partnership a user belongs to, on either side.

        Args:
            user_id: The user's ID

        Returns:
            The partnership if the user has one, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_pair(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Partnership]:
        """Find the partnership between two users, in either order.

        Args:
            user_a: First user
            user_b: Second user

        Returns:
            The partnership if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def exists_for_user(self, user_id: UserId) -> bool:
        """Check whether a user currently has a partner.

        Args:
            user_id: The user's ID

        Returns:
            True if the user appears in any partnership
        """
        pass

    @abstractmethod
    async def save(self, partnership: Partnership) -> Partnership:
        """Insert a new partnership.

        Args:
            partnership: The partnership in canonical order

        Returns:
            The saved partnership

        Raises:
            IntegrityError: If the pair is already partnered
        """
        pass

    @abstractmethod
    async def delete(self, partnership: Partnership) -> None:
        """Delete a partnership.

        Args:
            partnership: The partnership to remove
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Partnership]:
        """List every partnership, oldest first.

        Returns:
            All partnerships
        """
        pass
