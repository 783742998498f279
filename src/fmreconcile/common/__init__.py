"""Cross-cutting helpers (logging, memoization)."""

from __future__ import annotations

from .cache import MemoCache
from .logging import PACKAGE_LOGGER, configure_logging

__all__ = ["PACKAGE_LOGGER", "MemoCache", "configure_logging"]
