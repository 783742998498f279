from __future__ import annotations

from typing import TYPE_CHECKING

import logging

import pytest

from fmreconcile.adapters.yaml_codec import YamlMetadataCodec
from fmreconcile.app import build_engine, reset_default_engine
from fmreconcile.common.logging import PACKAGE_LOGGER
from fmreconcile.config import (
    LOG_LEVEL_ENV_VAR,
    MERGE_STRATEGY_ENV_VAR,
    NAMING_ENV_VAR,
    ORDER_ENV_VAR,
)
from fmreconcile.domain.merge import PropertyMerger
from fmreconcile.domain.standardize import NameStandardizer

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fmreconcile.domain.reconciliation import ReconciliationEngine


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (NAMING_ENV_VAR, ORDER_ENV_VAR, MERGE_STRATEGY_ENV_VAR, LOG_LEVEL_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    previous_level = package_logger.level
    reset_default_engine()
    try:
        yield
    finally:
        reset_default_engine()
        package_logger.setLevel(previous_level)


@pytest.fixture
def codec() -> YamlMetadataCodec:
    return YamlMetadataCodec()


@pytest.fixture
def engine(codec: YamlMetadataCodec) -> ReconciliationEngine:
    return build_engine(codec=codec)


@pytest.fixture
def merger() -> PropertyMerger:
    return PropertyMerger()


@pytest.fixture
def standardizer() -> NameStandardizer:
    return NameStandardizer()
