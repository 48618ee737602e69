import pytest
from pydantic import ValidationError

from wallet_api.config import Settings


def test_defaults(monkeypatch):
    """Base chain and the public 1inch proxy are used out of the box."""

    monkeypatch.delenv("DEFAULT_CHAIN_ID", raising=False)
    monkeypatch.delenv("PORTFOLIO_API_BASE_URL", raising=False)

    settings = Settings()

    assert settings.default_chain_id == "8453"
    assert settings.portfolio_api_base_url == "https://1inch-proxy-prtfl.vercel.app"
    assert settings.cache_max_age_seconds == 60


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_CHAIN_ID", "1")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("TOKEN_API_BASE_URL", "https://tokens.example")

    settings = Settings()

    assert settings.default_chain_id == "1"
    assert settings.request_timeout_seconds == 5
    assert settings.token_api_base_url == "https://tokens.example"


def test_unknown_default_chain_rejected(monkeypatch):
    monkeypatch.setenv("DEFAULT_CHAIN_ID", "999999")

    with pytest.raises(ValidationError):
        Settings()


def test_log_json_setting(monkeypatch):
    monkeypatch.delenv("LOG_JSON", raising=False)
    assert Settings().log_json is None

    monkeypatch.setenv("LOG_JSON", "false")
    assert Settings().log_json is False
