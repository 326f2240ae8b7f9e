"""Logging setup."""

import logging
import sys

from street_atlas.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for processes embedding street_atlas.

    The library itself only emits records through module loggers. Whatever
    process hosts it (a tile server, a loader script) calls this once at
    startup.
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
