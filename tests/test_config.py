"""Tests for settings validation and logging setup."""

import logging

import pytest

from utility_csr_api.app.core.config import Settings
from utility_csr_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging
from utility_csr_api.app.main import create_app


@pytest.mark.parametrize("window", [0, -3])
def test_history_window_must_be_positive(window):
    with pytest.raises(ValueError, match="HISTORY_WINDOW"):
        Settings(history_window=window)


@pytest.mark.parametrize("band", [-0.1, 1.0, 2.5])
def test_trend_band_range(band):
    with pytest.raises(ValueError, match="TREND_BAND"):
        Settings(trend_band=band)


def test_valid_overrides():
    config = Settings(history_window=1, trend_band=0.0, cors_origins="http://a, ,http://b")
    assert config.history_window == 1
    assert config.allowed_origins() == ["http://a", "http://b"]


def test_setup_logging_adds_handlers_once(memory_store):
    create_app(record_store=memory_store)
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    assert handlers

    setup_logging("DEBUG")
    assert logger.handlers == handlers
    assert logger.level == logging.DEBUG

    setup_logging("INFO")
    assert logger.level == logging.INFO
