# This project was developed with assistance from AI tools.
"""Process-wide logging setup."""

import logging

from .config import settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Apply the configured level and format to the root logger.

    SQLAlchemy engine logging follows DEBUG so query echo stays opt-in.
    """
    resolved = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=resolved, format=_FORMAT, force=True)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
