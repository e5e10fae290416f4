#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py [revision]

Upgrades to ``head`` unless a target revision is given.
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from dikenang.config import Settings
from dikenang.util.logging import setup_logging
from dikenang.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()
    target = argv[1] if len(argv) > 1 else "head"

    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", target=target):
        try:
            # migrations/env.py reads the database URL from settings
            alembic_cfg = Config("alembic.ini")
            command.upgrade(alembic_cfg, target)

            logfire.info("Database migrations completed", target=target)
            return 0

        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container fails and doesn't start with broken schema
            raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
