"""Tests for package logging configuration."""

from __future__ import annotations

import logging

import pytest

from pymupdf_tablestripper.config import StripperConfig
from pymupdf_tablestripper.logging_config import (
    LOG_LEVEL_ENV,
    ROOT_LOGGER_NAME,
    get_logger,
    resolve_level,
    set_verbose,
)
from pymupdf_tablestripper.stripper import TableStripper


@pytest.fixture
def package_logger(monkeypatch: pytest.MonkeyPatch):
    """The package root logger, restored to its level after the test."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    saved = root.level
    yield root
    root.setLevel(saved)


def test_level_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    assert resolve_level() == logging.DEBUG


def test_unset_level_defaults_to_warning(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    assert resolve_level() == logging.WARNING


def test_unknown_level_falls_back_to_warning(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "verbose")

    assert resolve_level() == logging.WARNING


def test_loggers_live_under_package_root():
    assert get_logger("grid").name == f"{ROOT_LOGGER_NAME}.grid"
    assert get_logger(f"{ROOT_LOGGER_NAME}.api").name == f"{ROOT_LOGGER_NAME}.api"


def test_set_verbose_toggles_package_level(package_logger: logging.Logger):
    set_verbose(True)
    assert package_logger.level == logging.DEBUG
    assert get_logger("grid").isEnabledFor(logging.DEBUG)

    set_verbose(False)
    assert package_logger.level == logging.WARNING


def test_verbose_does_not_leak_into_later_strippers(package_logger: logging.Logger):
    TableStripper(StripperConfig(verbose=True))
    assert package_logger.level == logging.DEBUG

    TableStripper(StripperConfig(verbose=False))

    assert package_logger.level == logging.WARNING
    assert not get_logger("stripper").isEnabledFor(logging.DEBUG)
