"""Partnership domain service.

Owns the partnership state machine: direct requests, acceptance and
rejection, and unmatching. Every operation that creates or destroys a
partnership locks both users first and re-checks its preconditions under
the lock, so concurrent accepts involving the same user cannot both win.
"""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from wingman.domain.error import (
    AlreadyPartneredError,
    ConflictError,
    DuplicatePendingError,
    InvalidStateError,
    NoPartnerError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from wingman.domain.model import Partnership, PartnershipRequest
from wingman.domain.repository import (
    PartnershipRepository,
    PartnershipRequestRepository,
    UserRepository,
)
from wingman.domain.value import (
    PartnershipId,
    PartnershipRequestId,
    RequestStatus,
    UserId,
)

from .base import Service


class PartnershipService(Service):
    """Domain service for partnership operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        partnership_repository: PartnershipRepository,
        request_repository: PartnershipRequestRepository,
    ) -> None:
        """Initialize partnership service.

        Args:
            user_repository: User repository, used for existence checks and locks
            partnership_repository: Partnership repository
            request_repository: Partnership request repository
        """
        self.user_repository = user_repository
        self.partnership_repository = partnership_repository
        self.request_repository = request_repository

    # Queries

    async def get_partnership(self, user_id: UserId) -> Partnership | None:
        """Get the partnership a user belongs to, if any."""
        with logfire.span("partnership_service.get_partnership", user_id=str(user_id)):
            return await self.partnership_repository.find_by_user(user_id)

    async def get_partner(self, user_id: UserId) -> UserId | None:
        """Get the id of a user's partner, if any."""
        partnership = await self.get_partnership(user_id)
        if partnership is None:
            return None
        return partnership.partner_of(user_id)

    async def has_partner(self, user_id: UserId) -> bool:
        return await self.partnership_repository.exists_for_user(user_id)

    async def list_pending_requests(self, user_id: UserId) -> list[PartnershipRequest]:
        """List pending requests the user sent or received, newest first."""
        with logfire.span(
            "partnership_service.list_pending_requests", user_id=str(user_id)
        ):
            requests = await self.request_repository.find_pending_for_user(user_id)
            logfire.info(
                "Pending requests listed", user_id=str(user_id), count=len(requests)
            )
            return requests

    # Commands

    async def send_request(
        self, sender_id: UserId, receiver_id: UserId
    ) -> PartnershipRequest:
        """Send a partnership request.

        Args:
            sender_id: Requesting user
            receiver_id: User being asked

        Returns:
            The pending request

        Raises:
            ValidationError: If sender and receiver are the same user
            NotFoundError: If the receiver does not exist
            AlreadyPartneredError: If either user already has a partner
            DuplicatePendingError: If a pending request exists in either direction
        """
        with logfire.span(
            "partnership_service.send_request",
            sender_id=str(sender_id),
            receiver_id=str(receiver_id),
        ):
            if sender_id == receiver_id:
                raise ValidationError("Cannot send a partnership request to yourself")

            receiver = await self.user_repository.find_by_id(receiver_id)
            if not receiver:
                logfire.warn("Request to unknown user", receiver_id=str(receiver_id))
                raise NotFoundError("User", str(receiver_id))

            if await self.partnership_repository.exists_for_user(sender_id):
                raise AlreadyPartneredError(
                    str(sender_id), "You already have a partner"
                )
            if await self.partnership_repository.exists_for_user(receiver_id):
                raise AlreadyPartneredError(
                    str(receiver_id), "This user already has a partner"
                )

            if await self.request_repository.find_pending_between(
                sender_id, receiver_id
            ):
                logfire.warn(
                    "Duplicate pending request",
                    sender_id=str(sender_id),
                    receiver_id=str(receiver_id),
                )
                raise DuplicatePendingError(str(sender_id), str(receiver_id))

            request = PartnershipRequest(
                id=PartnershipRequestId(uuid4()),
                sender_id=sender_id,
                receiver_id=receiver_id,
                status=RequestStatus.PENDING,
                created_at=datetime.now(),
            )

            try:
                saved = await self.request_repository.save(request)
            except IntegrityError:
                logfire.warn(
                    "Pending request unique index violated",
                    sender_id=str(sender_id),
                    receiver_id=str(receiver_id),
                )
                raise DuplicatePendingError(str(sender_id), str(receiver_id))

            logfire.info(
                "Partnership request sent",
                request_id=str(saved.id),
                sender_id=str(sender_id),
                receiver_id=str(receiver_id),
            )
            return saved

    async def _get_actionable_request(
        self, request_id: PartnershipRequestId, acting_user_id: UserId
    ) -> PartnershipRequest:
        request = await self.request_repository.find_by_id(request_id)
        if not request:
            raise NotFoundError("PartnershipRequest", str(request_id))
        if request.receiver_id != acting_user_id:
            logfire.warn(
                "Non-receiver acted on request",
                request_id=str(request_id),
                user_id=str(acting_user_id),
            )
            raise NotAuthorizedError(
                "partnership request", str(request_id), str(acting_user_id)
            )
        if not request.is_pending:
            raise InvalidStateError(
                "Partnership request", str(request_id), request.status.value
            )
        return request

    async def create_partnership(self, user_a: UserId, user_b: UserId) -> Partnership:
        """Partner two users, checking under lock that both are still free.

        Must run inside the caller's transaction so the partnership commits
        or rolls back together with whatever triggered it.

        Raises:
            AlreadyPartneredError: If either user has a partner
            ConflictError: If a concurrent transaction created the same pair
        """
        with logfire.span(
            "partnership_service.create_partnership",
            user_a=str(user_a),
            user_b=str(user_b),
        ):
            await self.user_repository.lock([user_a, user_b])
            return await self._insert_partnership(user_a, user_b)

    async def _insert_partnership(self, user_a: UserId, user_b: UserId) -> Partnership:
        # Caller holds the locks on both users
        for user_id in (user_a, user_b):
            if await self.partnership_repository.exists_for_user(user_id):
                logfire.warn("User already partnered", user_id=str(user_id))
                raise AlreadyPartneredError(str(user_id))

        partnership = Partnership.between(
            PartnershipId(uuid4()), user_a, user_b, datetime.now()
        )
        try:
            saved = await self.partnership_repository.save(partnership)
        except IntegrityError:
            logfire.warn(
                "Partnership unique constraint violated",
                user_a=str(user_a),
                user_b=str(user_b),
            )
            raise ConflictError("Partnership was created concurrently")

        logfire.info(
            "Partnership created",
            partnership_id=str(saved.id),
            user1_id=str(saved.user1_id),
            user2_id=str(saved.user2_id),
        )
        return saved

    async def accept_request(
        self, request_id: PartnershipRequestId, acting_user_id: UserId
    ) -> Partnership:
        """Accept a pending request, creating the partnership.

        Args:
            request_id: Request to accept
            acting_user_id: Must be the request's receiver

        Returns:
            The new partnership

        Raises:
            NotFoundError: If the request does not exist
            NotAuthorizedError: If the acting user is not the receiver
            InvalidStateError: If the request is no longer pending
            AlreadyPartneredError: If either user has partnered meanwhile
            ConflictError: If a concurrent accept created the same pair
        """
        with logfire.span(
            "partnership_service.accept_request",
            request_id=str(request_id),
            user_id=str(acting_user_id),
        ):
            request = await self._get_actionable_request(request_id, acting_user_id)

            await self.user_repository.lock([request.sender_id, request.receiver_id])

            # A concurrent accept or reject may have won while we waited
            request = await self._get_actionable_request(request_id, acting_user_id)
            partnership = await self._insert_partnership(
                request.sender_id, request.receiver_id
            )

            await self.request_repository.save(
                request.model_copy(
                    update={
                        "status": RequestStatus.ACCEPTED,
                        "responded_at": datetime.now(),
                    }
                )
            )

            logfire.info(
                "Partnership request accepted",
                request_id=str(request_id),
                partnership_id=str(partnership.id),
            )
            return partnership

    async def reject_request(
        self, request_id: PartnershipRequestId, acting_user_id: UserId
    ) -> PartnershipRequest:
        """Reject a pending request.

        Raises:
            NotFoundError: If the request does not exist
            NotAuthorizedError: If the acting user is not the receiver
            InvalidStateError: If the request is no longer pending
        """
        with logfire.span(
            "partnership_service.reject_request",
            request_id=str(request_id),
            user_id=str(acting_user_id),
        ):
            request = await self._get_actionable_request(request_id, acting_user_id)
            saved = await self.request_repository.save(
                request.model_copy(
                    update={
                        "status": RequestStatus.REJECTED,
                        "responded_at": datetime.now(),
                    }
                )
            )
            logfire.info("Partnership request rejected", request_id=str(request_id))
            return saved

    async def unmatch(self, user_id: UserId) -> UserId:
        """Dissolve the user's partnership.

        Args:
            user_id: Either member of the partnership

        Returns:
            The former partner's id

        Raises:
            NoPartnerError: If the user has no partner
        """
        with logfire.span("partnership_service.unmatch", user_id=str(user_id)):
            partnership = await self.partnership_repository.find_by_user(user_id)
            if not partnership:
                raise NoPartnerError(str(user_id))

            await self.user_repository.lock(
                [partnership.user1_id, partnership.user2_id]
            )

            # The partnership may have been dissolved while waiting for the lock
            partnership = await self.partnership_repository.find_by_user(user_id)
            if not partnership:
                raise NoPartnerError(str(user_id))

            await self.partnership_repository.delete(partnership)
            former_partner = partnership.partner_of(user_id)
            logfire.info(
                "Partnership dissolved",
                partnership_id=str(partnership.id),
                user_id=str(user_id),
                former_partner_id=str(former_partner),
            )
            return former_partner
