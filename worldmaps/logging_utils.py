"""Mini README: Logging helpers shared by every worldmaps module.

Structure:
    * configure_root_logger - install the single stream handler for the process.
    * get_logger - module logger factory used as ``LOGGER = get_logger(__name__)``.

Usage:
    Library modules only call ``get_logger``. The CLI calls
    ``configure_root_logger`` with the level from settings before running a
    command, so repeated configuration never stacks handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach a formatted stream handler to the root logger once."""

    global _LOGGER_INITIALISED
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if _LOGGER_INITIALISED:
        logging.getLogger().setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module logger; handlers are left to ``configure_root_logger``."""

    return logging.getLogger(name)
