import logging

import pytest
import structlog

from wallet_api import logging_config
from wallet_api.logging_config import setup_logging


def _renderer():
    formatter = logging.getLogger().handlers[0].formatter
    return formatter.processors[-1]


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    setup_logging()


def test_json_by_default_at_info():
    setup_logging("INFO")

    assert isinstance(_renderer(), structlog.processors.JSONRenderer)
    assert logging.getLogger().level == logging.INFO


def test_console_at_debug():
    setup_logging("DEBUG")

    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


def test_log_json_setting_overrides_level_default(monkeypatch):
    monkeypatch.setattr(logging_config.settings, "log_json", False)

    setup_logging("INFO")

    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


def test_noisy_loggers_quieted():
    setup_logging("DEBUG")

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
