"""Python client for the amoCRM API."""

from .core import (
    AuthScheme,
    HttpMethod,
    Credentials,
    RequestDescriptor,
    AmoCRMError,
    NetworkError,
    ApiError,
    FormatError,
    ConfigError,
    ModelNotFoundError,
    ParamsBag,
    ClientSettings,
    settings_from_env,
    credentials_from_env,
    configure_logging,
)
from .request import Request
from .resources import ResourceModel
from .client import AmoCRMClient

__all__ = [
    "AmoCRMClient",
    "Request",
    "ResourceModel",
    "AuthScheme",
    "HttpMethod",
    "Credentials",
    "RequestDescriptor",
    "AmoCRMError",
    "NetworkError",
    "ApiError",
    "FormatError",
    "ConfigError",
    "ModelNotFoundError",
    "ParamsBag",
    "ClientSettings",
    "settings_from_env",
    "credentials_from_env",
    "configure_logging",
]
