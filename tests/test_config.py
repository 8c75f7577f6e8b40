"""
Tests for the brewing calculator server configuration.
"""

import logging

import pytest
from mcp_brewcalc.config import BrewCalcConfig, get_config
from brewing_units.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("BREWCALC_PRECISION", raising=False)
    monkeypatch.delenv("BREWCALC_LOG_LEVEL", raising=False)


class TestGetConfig:
    """Tests for reading configuration from the environment."""

    def test_defaults(self):
        config = get_config()
        assert config == BrewCalcConfig(precision=3, log_level="INFO")

    def test_precision(self, monkeypatch):
        monkeypatch.setenv("BREWCALC_PRECISION", "5")
        assert get_config().precision == 5

    def test_invalid_precision(self, monkeypatch):
        monkeypatch.setenv("BREWCALC_PRECISION", "three")
        with pytest.raises(ConfigurationError):
            get_config()

    def test_negative_precision(self, monkeypatch):
        monkeypatch.setenv("BREWCALC_PRECISION", "-1")
        with pytest.raises(ConfigurationError):
            get_config()

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("BREWCALC_LOG_LEVEL", "debug")
        config = get_config()
        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("BREWCALC_LOG_LEVEL", "chatty")
        with pytest.raises(ConfigurationError):
            get_config()
