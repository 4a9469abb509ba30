"""Unit tests for partner suggestions."""

import random
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from wingman.config import MatchingSettings
from wingman.domain.error import AlreadyPartneredError, NotFoundError
from wingman.domain.model import User
from wingman.domain.repository import UserRepository
from wingman.domain.service import (
    CompatibilityScorer,
    MatchService,
    PartnershipService,
    find_top_matches,
)
from wingman.domain.value import Bio, DisplayName, Email, MatchCandidate, UserId
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

REQUESTER_BIO = "yoga and running"


def _requester() -> User:
    return User(
        id=UserId(uuid4()),
        name=DisplayName("Requester"),
        email=Email("requester@example.com"),
        bio=Bio(REQUESTER_BIO),
        password_hash="x",
    )


def _candidate(
    name: str, bio: str | None, partner_id: UserId | None = None, minutes: int = 0
) -> MatchCandidate:
    return MatchCandidate(
        user_id=UserId(uuid4()),
        name=name,
        bio=bio,
        partner_id=partner_id,
        created_at=datetime(2025, 1, 1) + timedelta(minutes=minutes),
    )


def _exact_scorer() -> CompatibilityScorer:
    return CompatibilityScorer(
        settings=MatchingSettings(jitter=0.0), rng=random.Random(0)
    )


class TestFindTopMatches:
    """Tests for the pure ranking function."""

    def test_ranks_by_score_descending(self):
        requester = _requester()
        low = _candidate("Low", "money", minutes=0)
        high = _candidate("High", "running yoga", minutes=1)

        matches = find_top_matches(requester, [low, high], 3, _exact_scorer())

        assert [m.name for m in matches] == ["High", "Low"]
        assert matches[0].compatibility_score == 100
        assert matches[1].compatibility_score == 0

    def test_ties_keep_input_order(self):
        requester = _requester()
        candidates = [
            _candidate(f"Twin {i}", "running yoga", minutes=i) for i in range(4)
        ]

        matches = find_top_matches(requester, candidates, 4, _exact_scorer())

        assert [m.name for m in matches] == ["Twin 0", "Twin 1", "Twin 2", "Twin 3"]

    def test_skips_requester_and_partnered_candidates(self):
        requester = _requester()
        itself = MatchCandidate(
            user_id=requester.id,
            name="Requester",
            bio=REQUESTER_BIO,
            created_at=datetime(2025, 1, 1),
        )
        taken = _candidate("Taken", "running yoga", partner_id=UserId(uuid4()))
        free = _candidate("Free", "money")

        matches = find_top_matches(
            requester, [itself, taken, free], 3, _exact_scorer()
        )

        assert [m.name for m in matches] == ["Free"]

    def test_returns_at_most_top_n(self):
        requester = _requester()
        candidates = [_candidate(f"C{i}", None, minutes=i) for i in range(5)]

        assert len(find_top_matches(requester, candidates, 3, _exact_scorer())) == 3
        assert len(find_top_matches(requester, candidates, 10, _exact_scorer())) == 5
        assert find_top_matches(requester, candidates, 0, _exact_scorer()) == []

    def test_empty_pool(self):
        assert find_top_matches(_requester(), [], 3, _exact_scorer()) == []

    def test_match_carries_candidate_details(self):
        requester = _requester()
        candidate = _candidate("Bob", "running yoga", minutes=5)

        [match] = find_top_matches(requester, [candidate], 1, _exact_scorer())

        assert match.user_id == candidate.user_id
        assert match.bio == "running yoga"
        assert match.member_since == candidate.created_at


class TestSuggestPartners:
    """Tests for MatchService.suggest_partners."""

    @pytest.mark.asyncio
    async def test_suggests_unpartnered_users(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        match_service = await unit_env.get(MatchService)
        partnership_service = await unit_env.get(PartnershipService)

        alice = await make_user(user_repo, "Alice", bio=REQUESTER_BIO)
        bob = await make_user(user_repo, "Bob", bio="running and yoga")
        carol = await make_user(user_repo, "Carol")
        dave = await make_user(user_repo, "Dave")
        await partnership_service.create_partnership(carol.id, dave.id)

        matches = await match_service.suggest_partners(alice.id)

        assert [m.user_id for m in matches] == [bob.id]

    @pytest.mark.asyncio
    async def test_default_count_is_three(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        match_service = await unit_env.get(MatchService)

        alice = await make_user(user_repo, "Alice")
        for i in range(5):
            await make_user(user_repo, f"User {i}")

        matches = await match_service.suggest_partners(alice.id)

        assert len(matches) == 3

    @pytest.mark.asyncio
    async def test_explicit_count(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        match_service = await unit_env.get(MatchService)

        alice = await make_user(user_repo, "Alice")
        for i in range(5):
            await make_user(user_repo, f"User {i}")

        matches = await match_service.suggest_partners(alice.id, top_n=5)

        assert len(matches) == 5

    @pytest.mark.asyncio
    async def test_nobody_else_returns_empty_list(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        match_service = await unit_env.get(MatchService)

        alice = await make_user(user_repo, "Alice")

        assert await match_service.suggest_partners(alice.id) == []

    @pytest.mark.asyncio
    async def test_partnered_user_is_rejected(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        match_service = await unit_env.get(MatchService)
        partnership_service = await unit_env.get(PartnershipService)

        alice = await make_user(user_repo, "Alice")
        bob = await make_user(user_repo, "Bob")
        await make_user(user_repo, "Carol")
        await partnership_service.create_partnership(alice.id, bob.id)

        with pytest.raises(AlreadyPartneredError):
            await match_service.suggest_partners(alice.id)

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        match_service = await unit_env.get(MatchService)

        with pytest.raises(NotFoundError):
            await match_service.suggest_partners(UserId(uuid4()))
