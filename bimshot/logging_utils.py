"""Mini README: Application-wide logging helpers for bimshot.

Structure:
    * get_logger - factory returning module loggers with baseline setup.
    * configure_root_logger - installs the root handler once, adjusts level after.
    * level_for_environment - maps the configured environment to a level.

Usage:
    Modules import ``get_logger`` and keep a module-level ``LOGGER``. The
    classification engine accepts a logger at construction instead, so
    callers can route its diagnostics wherever they need. Page console
    output forwarded from the headless browser is logged at DEBUG, which
    the development environment shows.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False

_ENVIRONMENT_LEVELS = {
    "development": logging.DEBUG,
    "test": logging.WARNING,
}


def level_for_environment(environment: str) -> int:
    """Return the root level for an environment label; unknown labels get INFO."""

    return _ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def configure_root_logger(level: int = logging.INFO) -> None:
    """Configure the root logger; later calls only change the level."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger, installing the root handler on first use."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
