"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError, InvalidConfigurationError
from .log_level import LOG_LEVEL_ENV_VAR, get_log_level
from .reconcile import (
    MERGE_STRATEGY_ENV_VAR,
    NAMING_ENV_VAR,
    ORDER_ENV_VAR,
    get_reconcile_options,
)

__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "MERGE_STRATEGY_ENV_VAR",
    "NAMING_ENV_VAR",
    "ORDER_ENV_VAR",
    "ConfigurationError",
    "InvalidConfigurationError",
    "get_log_level",
    "get_reconcile_options",
    "optional_env_var",
]
