"""Mini README: Application-wide logging helpers for Pocket Ledger.

Structure:
    * configure_root_logger - attach the shared handler and set the level.
    * get_logger - module logger factory ensuring baseline configuration.

Usage:
    Modules import ``get_logger`` at import time and keep a module-level
    ``LOGGER``. Entry points (the CLI, the web factory) call
    ``configure_root_logger`` again with the configured level; repeated calls
    only adjust the level so handlers are never duplicated.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger once and update its level on later calls."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
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
