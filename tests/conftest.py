"""Pytest configuration and fixtures."""

import logging

import pytest
import structlog

from shapeguard.logging import LoggerRegistry


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore logging state so configure_logging() in one test can't leak into another."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield

    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    LoggerRegistry._loggers.clear()
