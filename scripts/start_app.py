#!/usr/bin/env python3
"""Start the sharing API under uvicorn with Logfire configured first."""

import sys
import logfire
import uvicorn

from collab.config import Settings, ensure_deployable
from collab.util.logging import setup_logging
from collab.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then serve the app."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        ensure_deployable(settings)
        logfire.info(
            "Starting objective sharing API",
            host=settings.host,
            port=settings.port,
            local_mode=settings.sharing.local_mode_enabled,
        )

        # Importing the app calls create_app; Logfire is already configured
        uvicorn.run(
            "collab.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
