"""Mini README: Application-wide logging helpers for the finance manager.

Structure:
    * configure_root_logger - installs the shared stream handler once and
      adjusts the global level on later calls.
    * get_logger - factory returning module loggers with baseline configuration.

Usage:
    Modules create ``LOGGER = get_logger(__name__)`` at import time. The ledger
    core only emits DEBUG diagnostics; user-facing messages are rendered by the
    console, CLI, and web front ends instead.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
