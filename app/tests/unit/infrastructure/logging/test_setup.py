"""Tests for logging setup."""

import logging

import pytest
import structlog

from infrastructure.logging import configure_logging, get_module_logger


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_quiet_under_pytest(self):
        logger = configure_logging()

        assert logger is not None
        assert logging.root.level > logging.CRITICAL

    def test_logger_accepts_structured_events(self):
        logger = configure_logging()

        logger.info("bootstrap_gate_transition", previous="initializing", current="ready")


@pytest.mark.unit
class TestLoggerHelpers:
    """Tests for get_module_logger()."""

    def test_get_module_logger_binds_module_context(self):
        logger = get_module_logger()

        context = structlog.get_context(logger)
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]
