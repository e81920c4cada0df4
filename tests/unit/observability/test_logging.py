"""Unit tests for observability logging."""

from __future__ import annotations

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from mp_hermes.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("svc", worker="w-1").info("hello", n=1)
        assert logs == [{"event": "hello", "worker": "w-1", "n": 1, "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_configure_json(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_configure_console(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG, json=False)
        assert logging.getLogger().level == logging.DEBUG
