"""Tests for environment-based configuration."""

import logging

import pytest

from amocrm_toolkit.core.config import (
    ClientSettings,
    configure_logging,
    credentials_from_env,
    settings_from_env,
)
from amocrm_toolkit.core.models import ConfigError, Credentials


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every AMOCRM_ variable for the test."""
    for name in (
        "AMOCRM_DOMAIN",
        "AMOCRM_LOGIN",
        "AMOCRM_APIKEY",
        "AMOCRM_VERIFY_SSL",
        "AMOCRM_TIMEOUT",
        "AMOCRM_CLEAR_PARAMS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env):
    """Test defaults when no variables are set."""
    settings = settings_from_env()

    assert settings == ClientSettings()
    assert settings.verify_ssl is False
    assert settings.timeout_seconds == 10.0
    assert settings.clear_params_after_request is False
    assert settings.base_host == "amocrm.ru"


def test_settings_from_env(clean_env):
    """Test values are read from the environment."""
    clean_env.setenv("AMOCRM_VERIFY_SSL", "true")
    clean_env.setenv("AMOCRM_TIMEOUT", "2.5")
    clean_env.setenv("AMOCRM_CLEAR_PARAMS", "1")

    settings = settings_from_env()

    assert settings.verify_ssl is True
    assert settings.timeout_seconds == 2.5
    assert settings.clear_params_after_request is True


def test_settings_invalid_boolean(clean_env):
    """Test an unknown boolean spelling raises ConfigError."""
    clean_env.setenv("AMOCRM_VERIFY_SSL", "maybe")

    with pytest.raises(ConfigError) as exc_info:
        settings_from_env()

    assert "AMOCRM_VERIFY_SSL" in str(exc_info.value)


def test_settings_invalid_timeout(clean_env):
    """Test a non-numeric timeout raises ConfigError."""
    clean_env.setenv("AMOCRM_TIMEOUT", "soon")

    with pytest.raises(ConfigError) as exc_info:
        settings_from_env()

    assert isinstance(exc_info.value.__cause__, ValueError)


def test_credentials_from_env(clean_env):
    """Test credentials are read from the environment."""
    clean_env.setenv("AMOCRM_DOMAIN", "example")
    clean_env.setenv("AMOCRM_LOGIN", "login@domain")
    clean_env.setenv("AMOCRM_APIKEY", "hash")

    assert credentials_from_env() == Credentials("example", "login@domain", "hash")


def test_credentials_from_env_missing(clean_env):
    """Test missing variables are all named in the error."""
    clean_env.setenv("AMOCRM_DOMAIN", "example")

    with pytest.raises(ConfigError) as exc_info:
        credentials_from_env()

    assert "AMOCRM_LOGIN" in str(exc_info.value)
    assert "AMOCRM_APIKEY" in str(exc_info.value)
    assert "AMOCRM_DOMAIN" not in str(exc_info.value)


def test_configure_logging_quiets_httpx():
    """Test httpx logs are limited to warnings."""
    configure_logging(verbose=True)

    assert logging.getLogger("httpx").level == logging.WARNING
