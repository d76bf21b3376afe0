"""Logging configuration shared by the API and the CLI."""

import logging
import sys
from functools import lru_cache

from .settings import get_settings


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the beststories packages with:
    - Console output with timestamps and module names
    - Configurable log level for our modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("beststories").setLevel(log_level)
    logging.getLogger("beststories_config").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
