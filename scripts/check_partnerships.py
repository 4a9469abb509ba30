#!/usr/bin/env python3
"""Report inconsistencies in partnership data.

Checks for:
- users that appear in more than one partnership
- partnerships whose members no longer exist
- accepted invitations whose inviter and invitee are not partnered

Exits non-zero when any issue is found. Read-only.
"""

import asyncio
import sys
from collections import Counter

from sqlalchemy import select

from wingman.config import Settings
from wingman.domain.model import Invitation, Partnership, User
from wingman.persistence.database import create_engine, create_session_factory
from wingman.persistence.mappers import row_to_invitation
from wingman.persistence.repository import (
    PostgresPartnershipRepository,
    PostgresUserRepository,
)
from wingman.persistence.tables import invitations_table
from wingman.util.logging import get_logger, setup_logging

logger = get_logger(__name__)


def find_issues(
    users: list[User],
    partnerships: list[Partnership],
    accepted_invitations: list[Invitation],
) -> list[str]:
    """Return a human readable line per inconsistency."""
    issues: list[str] = []
    known_ids = {user.id for user in users}

    memberships = Counter(
        member for p in partnerships for member in (p.user1_id, p.user2_id)
    )
    for user_id, count in sorted(memberships.items(), key=lambda item: str(item[0])):
        if count > 1:
            issues.append(f"User {user_id} is in {count} partnerships")

    for partnership in partnerships:
        for member in (partnership.user1_id, partnership.user2_id):
            if member not in known_ids:
                issues.append(
                    f"Partnership {partnership.id} references missing user {member}"
                )

    for invitation in accepted_invitations:
        if invitation.accepted_by_user_id is None:
            # Invitee account was deleted
            continue
        partnered = any(
            p.includes(invitation.sender_id)
            and p.includes(invitation.accepted_by_user_id)
            for p in partnerships
        )
        if not partnered:
            issues.append(
                f"Invitation {invitation.id} was accepted by "
                f"{invitation.accepted_by_user_id} but no partnership exists "
                f"with {invitation.sender_id}"
            )

    return issues


async def run(settings: Settings) -> list[str]:
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)
    try:
        async with session_factory() as session:
            users = await PostgresUserRepository(session).find_all()
            partnerships = await PostgresPartnershipRepository(session).find_all()
            result = await session.execute(
                select(invitations_table).where(
                    invitations_table.c.status == "accepted"
                )
            )
            accepted = [row_to_invitation(dict(row)) for row in result.mappings()]
    finally:
        await engine.dispose()

    logger.info(
        "Checked %d users, %d partnerships, %d accepted invitations",
        len(users),
        len(partnerships),
        len(accepted),
    )
    return find_issues(users, partnerships, accepted)


def main() -> int:
    settings = Settings()
    setup_logging(settings)

    issues = asyncio.run(run(settings))
    for issue in issues:
        logger.warning(issue)

    if issues:
        logger.error("Found %d partnership issue(s)", len(issues))
        return 1
    logger.info("No partnership issues found")
    return 0


if __name__ == "__main__":
    sys.exit(main())
