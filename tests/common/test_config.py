from __future__ import annotations

import logging

import pytest

from fmreconcile.config import (
    LOG_LEVEL_ENV_VAR,
    MERGE_STRATEGY_ENV_VAR,
    NAMING_ENV_VAR,
    ORDER_ENV_VAR,
    ConfigurationError,
    InvalidConfigurationError,
    get_log_level,
    get_reconcile_options,
    optional_env_var,
)
from fmreconcile.domain.options import MergeStrategy, NamingMode, OrderMode, ReconcileOptions


def test_optional_env_var_returns_stripped_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value ")

    assert optional_env_var("EXAMPLE_VAR") == "value"


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    assert optional_env_var("EXAMPLE_VAR") is None


def test_unset_environment_gives_defaults() -> None:
    assert get_reconcile_options() == ReconcileOptions()


def test_options_are_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(NAMING_ENV_VAR, "as-is")
    monkeypatch.setenv(ORDER_ENV_VAR, "AS_IS")
    monkeypatch.setenv(MERGE_STRATEGY_ENV_VAR, "Maximum")

    options = get_reconcile_options()

    assert options.naming is NamingMode.AS_IS
    assert options.order is OrderMode.AS_IS
    assert options.merge_strategy is MergeStrategy.MAXIMUM


def test_blank_variable_keeps_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MERGE_STRATEGY_ENV_VAR, " ")
    monkeypatch.setenv(ORDER_ENV_VAR, "sorted")

    options = get_reconcile_options()

    assert options.merge_strategy is MergeStrategy.CONSERVATIVE
    assert options.order is OrderMode.SORTED


def test_unknown_naming_mode_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(NAMING_ENV_VAR, "fancy")

    with pytest.raises(InvalidConfigurationError) as exc:
        get_reconcile_options()

    assert exc.value.name == NAMING_ENV_VAR
    assert exc.value.value == "fancy"
    assert NAMING_ENV_VAR in str(exc.value)
    assert isinstance(exc.value, ConfigurationError)


def test_unknown_merge_strategy_lists_allowed_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MERGE_STRATEGY_ENV_VAR, "extreme")

    with pytest.raises(InvalidConfigurationError) as exc:
        get_reconcile_options()

    assert exc.value.allowed == ("none", "conservative", "aggressive", "maximum")


def test_log_level_is_unset_by_default() -> None:
    assert get_log_level() is None


def test_log_level_is_read_by_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")

    assert get_log_level() == logging.DEBUG


def test_unknown_log_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")

    with pytest.raises(InvalidConfigurationError) as exc:
        get_log_level()

    assert "debug" in exc.value.allowed
