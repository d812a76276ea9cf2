#!/usr/bin/env python3
"""Start the blog API with logging and Logfire configured for startup errors."""

import sys
import logfire
import uvicorn

from blog.config import Settings
from blog.util.error import check_production_settings
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure logging and Logfire early to catch startup errors
    setup_logging(settings)
    configure_logfire(settings)

    try:
        check_production_settings(settings)
        logfire.info("Starting blog API", host=settings.host, port=settings.port)

        uvicorn.run(
            "blog.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the process exits non-zero
        raise


if __name__ == "__main__":
    sys.exit(main())
