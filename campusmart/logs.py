from __future__ import annotations

import logging

from .config import get_log_level

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once for the process (API startup, scripts)."""
    lvl = (level or get_log_level()).upper()
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, lvl, logging.INFO))
