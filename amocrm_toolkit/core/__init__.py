"""Core components for the amoCRM toolkit."""

from .models import (
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
)
from .params import ParamsBag
from .registry import (
    register_resource,
    resource,
    get_resource,
    list_resources,
    reset_registry,
)
from .config import (
    ClientSettings,
    settings_from_env,
    credentials_from_env,
    configure_logging,
)

__all__ = [
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
    "register_resource",
    "resource",
    "get_resource",
    "list_resources",
    "reset_registry",
    "ClientSettings",
    "settings_from_env",
    "credentials_from_env",
    "configure_logging",
]
