"""Tests for logging setup."""

import logging

import colorlog
import pytest

from imperial.core.bootstrap import create_service_registry
from imperial.core.logging import LOGGER_NAME, setup_logging
from imperial.core.settings import Settings


@pytest.fixture
def package_logger():
    """Restore the package logger's handlers and level after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def _coloured_handlers(logger):
    return [
        handler
        for handler in logger.handlers
        if isinstance(handler.formatter, colorlog.ColoredFormatter)
    ]


def test_bootstrap_leaves_root_logger_alone(package_logger):
    root = logging.getLogger()
    root_handlers = list(root.handlers)
    root_level = root.level

    create_service_registry(Settings(builtin_services=""))

    assert root.handlers == root_handlers
    assert root.level == root_level
    assert len(_coloured_handlers(package_logger)) == 1


def test_bootstrap_twice_adds_one_handler(package_logger):
    settings = Settings(builtin_services="github")
    create_service_registry(settings)
    create_service_registry(settings)

    assert len(_coloured_handlers(package_logger)) == 1


def test_setup_logging_updates_level(package_logger):
    setup_logging("DEBUG")
    assert package_logger.level == logging.DEBUG

    setup_logging("warning")
    assert package_logger.level == logging.WARNING
    assert len(_coloured_handlers(package_logger)) == 1
