"""Logging setup: one stdout handler, level from settings.

SQL statement logging stays with SQLAlchemy's echo flag (database_echo),
so the engine logger is held at WARNING unless echo is on.
"""

import logging
import sys

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are noisy at INFO.
QUIET_LOGGERS = ("sqlalchemy.engine", "slowapi", "httpx")


def setup_logging() -> None:
    """Configure root logging. DEBUG when settings.debug is True, otherwise INFO."""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in QUIET_LOGGERS:
        if name == "sqlalchemy.engine" and settings.database_echo:
            continue
        logging.getLogger(name).setLevel(logging.WARNING)
