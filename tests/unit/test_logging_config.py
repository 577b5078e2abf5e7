"""Tests for structlog configuration."""

import logging

import pytest
import structlog

from simpleswap.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_filters_below_level(self, capsys):
        configure_logging("WARNING")
        logger = structlog.get_logger()
        logger.info("hidden_event")
        logger.warning("shown_event", code="Expired")

        out = capsys.readouterr().out
        assert "hidden_event" not in out
        assert "shown_event" in out
        assert "Expired" in out

    def test_level_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("SIMPLESWAP_LOG_LEVEL", "debug")
        configure_logging()
        structlog.get_logger().debug("debug_event")
        assert "debug_event" in capsys.readouterr().out

    def test_numeric_level(self, capsys):
        configure_logging(logging.ERROR)
        structlog.get_logger().warning("quiet_event")
        assert "quiet_event" not in capsys.readouterr().out

    def test_unknown_level_falls_back_to_info(self, capsys):
        configure_logging("chatty")
        logger = structlog.get_logger()
        logger.debug("debug_event")
        logger.info("info_event")
        out = capsys.readouterr().out
        assert "debug_event" not in out
        assert "info_event" in out
