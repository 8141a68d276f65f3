"""Logger setup shared by every module of the package."""

from __future__ import annotations

import logging
from typing import Optional

from . import config

LOGGER_NAME = "sudoku_propagation"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the package logger, or a child of it when ``name`` is given.

    The first call attaches a console handler to the package logger at the
    level from ``config.LOG_LEVEL``; later calls reuse it.
    """
    root = logging.getLogger(LOGGER_NAME)

    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(config.LOG_LEVEL)

    if name is None or name == LOGGER_NAME:
        return root
    if name.startswith(LOGGER_NAME + "."):
        name = name[len(LOGGER_NAME) + 1:]
    return root.getChild(name)
