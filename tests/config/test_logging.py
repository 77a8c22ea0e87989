"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Generator

import pytest
import structlog

from peashoot.config.logging import LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pea_level = logging.getLogger(LOGGER_NAME).level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger(LOGGER_NAME).setLevel(pea_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_quiet_by_default(self) -> None:
        configure_logging()
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_stdlib_records_render_as_json(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("peashoot.services.locations").debug("calculate_date: matched")
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "calculate_date: matched"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "peashoot.services.locations"
        assert "timestamp" in parsed

    def test_structlog_key_values(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        structlog.get_logger("peashoot.test").warning("fixture loaded", count=3)
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["count"] == 3

    def test_other_libraries_stay_at_warning(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("ruamel").debug("noise")
        assert stream.getvalue() == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
