"""Default reconciliation options loaded from the environment."""

from __future__ import annotations

from typing import Final

from fmreconcile.domain.options import MergeStrategy, NamingMode, OrderMode, ReconcileOptions

from .env import optional_env_var
from .errors import InvalidConfigurationError

NAMING_ENV_VAR: Final[str] = "FMRECONCILE_NAMING"
ORDER_ENV_VAR: Final[str] = "FMRECONCILE_ORDER"
MERGE_STRATEGY_ENV_VAR: Final[str] = "FMRECONCILE_MERGE_STRATEGY"


def get_reconcile_options() -> ReconcileOptions:
    """Build options from ``FMRECONCILE_*`` variables; unset values keep the defaults."""

    defaults = ReconcileOptions()
    return ReconcileOptions(
        naming=_naming_mode(optional_env_var(NAMING_ENV_VAR), defaults.naming),
        order=_order_mode(optional_env_var(ORDER_ENV_VAR), defaults.order),
        merge_strategy=_merge_strategy(
            optional_env_var(MERGE_STRATEGY_ENV_VAR), defaults.merge_strategy
        ),
    )


def _naming_mode(value: str | None, default: NamingMode) -> NamingMode:
    if value is None:
        return default
    try:
        return NamingMode(_normalized(value))
    except ValueError as exc:
        raise InvalidConfigurationError(
            name=NAMING_ENV_VAR, value=value, allowed=tuple(NamingMode)
        ) from exc


def _order_mode(value: str | None, default: OrderMode) -> OrderMode:
    if value is None:
        return default
    try:
        return OrderMode(_normalized(value))
    except ValueError as exc:
        raise InvalidConfigurationError(
            name=ORDER_ENV_VAR, value=value, allowed=tuple(OrderMode)
        ) from exc


def _merge_strategy(value: str | None, default: MergeStrategy) -> MergeStrategy:
    if value is None:
        return default
    try:
        return MergeStrategy[_normalized(value).upper()]
    except KeyError as exc:
        raise InvalidConfigurationError(
            name=MERGE_STRATEGY_ENV_VAR,
            value=value,
            allowed=tuple(strategy.name.lower() for strategy in MergeStrategy),
        ) from exc


def _normalized(value: str) -> str:
    return value.strip().lower().replace("-", "_")
