"""Log level for the fmreconcile logger tree."""

from __future__ import annotations

import logging
from typing import Final

from .env import optional_env_var
from .errors import InvalidConfigurationError

LOG_LEVEL_ENV_VAR: Final[str] = "FMRECONCILE_LOG_LEVEL"


def get_log_level() -> int | None:
    """Return the level named by ``FMRECONCILE_LOG_LEVEL``, or None when unset."""

    value = optional_env_var(LOG_LEVEL_ENV_VAR)
    if value is None:
        return None
    levels = logging.getLevelNamesMapping()
    level = levels.get(value.upper())
    if level is None:
        raise InvalidConfigurationError(
            name=LOG_LEVEL_ENV_VAR,
            value=value,
            allowed=tuple(name.lower() for name in sorted(levels, key=levels.__getitem__)),
        )
    return level
