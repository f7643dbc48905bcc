import pytest

from core.config import DEFAULT_API_URL, load_settings
from core.errors import ConfigurationError


def test_missing_api_key_raises():
    with pytest.raises(ConfigurationError, match="ROBINHOOD_API_KEY"):
        load_settings({})


def test_blank_api_key_counts_as_missing():
    with pytest.raises(ConfigurationError):
        load_settings({"ROBINHOOD_API_KEY": "   "})


def test_default_base_url():
    settings = load_settings({"ROBINHOOD_API_KEY": "abc"})
    assert settings.api_key == "abc"
    assert settings.base_url == DEFAULT_API_URL


def test_base_url_override():
    settings = load_settings({"ROBINHOOD_API_KEY": "abc", "ROBINHOOD_API_URL": "https://staging.test/v"})
    assert settings.base_url == "https://staging.test/v"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ROBINHOOD_API_KEY", "from-env")
    monkeypatch.delenv("ROBINHOOD_API_URL", raising=False)
    assert load_settings().api_key == "from-env"
