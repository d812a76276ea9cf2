"""Standard library logging setup.

Structured events go through logfire; this covers plain ``logging``
output (tracebacks from the error handlers, uvicorn, alembic).
"""

import logging
import sys

from blog.config import Settings

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "alembic.runtime.migration")


def level_for(settings: Settings) -> int:
    """Log level for the environment: DEBUG if debugging, quiet under tests."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the process.

    Args:
        settings: Application settings
    """
    level = level_for(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("blog").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
