from __future__ import annotations

import logging

import pytest

from fmreconcile.common.logging import PACKAGE_LOGGER, configure_logging
from fmreconcile.domain.merge import PropertyMerger
from fmreconcile.domain.options import MergeStrategy


def test_configure_logging_sets_package_level() -> None:
    logger = configure_logging(logging.DEBUG)

    assert logger is logging.getLogger(PACKAGE_LOGGER)
    assert logger.level == logging.DEBUG
    assert logging.getLogger("fmreconcile.domain.merge").getEffectiveLevel() == logging.DEBUG


def test_configure_logging_without_level_keeps_current() -> None:
    configure_logging(logging.WARNING)

    assert configure_logging().level == logging.WARNING


def test_debug_level_shows_merge_decisions(caplog: pytest.LogCaptureFixture) -> None:
    configure_logging(logging.DEBUG)

    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
        PropertyMerger().merge({"tags": ["a"], "keywords": ["b"]}, MergeStrategy.CONSERVATIVE)

    assert "Merging ['tags', 'keywords'] into 'tags'" in caplog.text
