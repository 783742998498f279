"""Logger tree used by fmreconcile."""

from __future__ import annotations

import logging
from typing import Final

PACKAGE_LOGGER: Final[str] = "fmreconcile"


def configure_logging(level: int | None = None) -> logging.Logger:
    """Set the level of the ``fmreconcile`` logger tree and return its root logger.

    Handlers are left to the embedding application. At DEBUG every merge and
    standardization decision is logged. ``None`` keeps the current level.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    if level is not None:
        logger.setLevel(level)
    return logger
