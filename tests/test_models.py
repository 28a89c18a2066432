"""Tests for core data models."""

import dataclasses

import pytest

from amocrm_toolkit.core.models import (
    AmoCRMError,
    ApiError,
    AuthScheme,
    ConfigError,
    Credentials,
    FormatError,
    HttpMethod,
    ModelNotFoundError,
    NetworkError,
    RequestDescriptor,
)


def test_auth_scheme_query_keys():
    """Test each scheme names its own query parameters."""
    assert AuthScheme.LEGACY.query_keys == ("login", "api_key")
    assert AuthScheme.CURRENT.query_keys == ("USER_LOGIN", "USER_HASH")


def test_credentials_to_dict():
    """Test Credentials converts to the auth mapping."""
    credentials = Credentials(domain="example", login="login", apikey="hash")

    assert credentials.to_dict() == {"domain": "example", "login": "login", "apikey": "hash"}


def test_credentials_are_immutable():
    """Test Credentials cannot be changed once created."""
    credentials = Credentials(domain="example", login="login", apikey="hash")

    with pytest.raises(dataclasses.FrozenInstanceError):
        credentials.domain = "other"


def test_request_descriptor_defaults():
    """Test RequestDescriptor without a modified date."""
    descriptor = RequestDescriptor(path="/foo/", method=HttpMethod.GET)

    assert descriptor.modified_since is None
    assert descriptor.method.value == "GET"


@pytest.mark.parametrize("error_cls", [NetworkError, ApiError, FormatError, ConfigError, ModelNotFoundError])
def test_errors_share_base(error_cls):
    """Test every error derives from AmoCRMError and carries a code."""
    error = error_cls("Something failed", 7)

    assert isinstance(error, AmoCRMError)
    assert str(error) == "Something failed"
    assert error.message == "Something failed"
    assert error.code == 7


def test_error_code_defaults_to_zero():
    """Test errors without a code report 0."""
    assert ApiError("Account not found").code == 0


def test_model_not_found_is_attribute_error():
    """Test unknown models behave like missing attributes."""
    assert issubclass(ModelNotFoundError, AttributeError)
