"""Concurrent partnership acceptance against PostgreSQL.

Each accept runs in its own session and transaction, so the row locks taken
by PostgresUserRepository.lock are what serialize them.
"""

import asyncio

import pytest
import pytest_asyncio

from wingman.config import Settings
from wingman.domain.error import AlreadyPartneredError, ConflictError
from wingman.domain.service import PartnershipService
from wingman.persistence.database import create_engine, create_session_factory
from wingman.persistence.repository import (
    PostgresPartnershipRepository,
    PostgresPartnershipRequestRepository,
    PostgresUserRepository,
)
from tests.factories import make_user

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def session_factory():
    engine = create_engine(Settings())
    yield create_session_factory(engine)
    await engine.dispose()


def _service(session) -> PartnershipService:
    return PartnershipService(
        user_repository=PostgresUserRepository(session),
        partnership_repository=PostgresPartnershipRepository(session),
        request_repository=PostgresPartnershipRequestRepository(session),
    )


async def _accept(session_factory, request_id, user_id):
    """Accept in a fresh transaction, committing on success."""
    async with session_factory() as session:
        try:
            partnership = await _service(session).accept_request(request_id, user_id)
        except Exception:
            await session.rollback()
            raise
        await session.commit()
        return partnership


class TestConcurrentAccepts:
    """Only one of two overlapping accepts may partner the shared user."""

    @pytest.mark.asyncio
    async def test_receiver_and_sender_roles(self, session_factory):
        """A receives from B and asks C; A and C accept at the same time."""
        async with session_factory() as session:
            user_repo = PostgresUserRepository(session)
            a = await make_user(user_repo, name="Ann")
            b = await make_user(user_repo, name="Ben")
            c = await make_user(user_repo, name="Cal")
            service = _service(session)
            from_b = await service.send_request(b.id, a.id)
            to_c = await service.send_request(a.id, c.id)
            await session.commit()

        results = await asyncio.gather(
            _accept(session_factory, from_b.id, a.id),
            _accept(session_factory, to_c.id, c.id),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 1
        assert isinstance(failures[0], (AlreadyPartneredError, ConflictError))

        async with session_factory() as session:
            partnerships = await PostgresPartnershipRepository(session).find_all()
        assert len([p for p in partnerships if p.includes(a.id)]) == 1

    @pytest.mark.asyncio
    async def test_two_senders_one_receiver(self, session_factory):
        """B has requests from A and C and accepts both at once."""
        async with session_factory() as session:
            user_repo = PostgresUserRepository(session)
            a = await make_user(user_repo, name="Ann")
            b = await make_user(user_repo, name="Ben")
            c = await make_user(user_repo, name="Cal")
            service = _service(session)
            from_a = await service.send_request(a.id, b.id)
            from_c = await service.send_request(c.id, b.id)
            await session.commit()

        results = await asyncio.gather(
            _accept(session_factory, from_a.id, b.id),
            _accept(session_factory, from_c.id, b.id),
            return_exceptions=True,
        )

        assert sum(isinstance(r, Exception) for r in results) == 1
        async with session_factory() as session:
            partner_repo = PostgresPartnershipRepository(session)
            partnership = await partner_repo.find_by_user(b.id)
            assert partnership is not None
            partnerships = await partner_repo.find_all()
        assert len([p for p in partnerships if p.includes(b.id)]) == 1
