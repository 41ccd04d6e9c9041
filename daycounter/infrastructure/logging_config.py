"""Basic logging configuration (minimal)."""

import logging
from typing import Optional

from daycounter.infrastructure.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once for the process.

    Args:
        level: Level name; defaults to LOG_LEVEL env var (INFO)

    Unknown level names fall back to INFO.
    """
    level_name = (level or get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )

    lg = logging.getLogger("daycounter")
    if lg.level == logging.NOTSET:
        lg.setLevel(getattr(logging, level_name, logging.INFO))
