"""Process-wide logging configuration."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level '{level}'")
    logging.basicConfig(level=numeric, format=LOG_FORMAT, force=True)
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(max(numeric, logging.WARNING))
