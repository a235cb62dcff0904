#!/usr/bin/env python3
"""Apply database migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from collab.config import Settings
from collab.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to head."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Applying sharing schema migrations")
        command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Sharing schema is up to date")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than serve against a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
