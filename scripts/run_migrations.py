#!/usr/bin/env python3
"""Apply Wingman database migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1d7f0a9b42
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from wingman.config import Settings
from wingman.util.logging import get_logger, setup_logging
from wingman.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"

logger = get_logger(__name__)


def main(argv: list[str]) -> int:
    """Upgrade the schema to the requested revision (default: head)."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    revision = argv[1] if len(argv) > 1 else "head"

    with logfire.span("run_migrations", revision=revision):
        try:
            alembic_cfg = Config(str(ALEMBIC_INI))
            logger.info("Upgrading database to %s", revision)
            command.upgrade(alembic_cfg, revision)
            logfire.info("Database migrations completed", revision=revision)
            return 0

        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start on a broken schema
            raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
