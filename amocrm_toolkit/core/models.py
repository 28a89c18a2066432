"""Core data models and errors for the amoCRM toolkit."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AuthScheme(Enum):
    """How credentials are encoded into the query string."""
    LEGACY = "legacy"
    CURRENT = "current"

    @property
    def query_keys(self) -> tuple[str, str]:
        """Return the (login, key) query parameter names for this scheme."""
        if self is AuthScheme.LEGACY:
            return ("login", "api_key")
        return ("USER_LOGIN", "USER_HASH")


class HttpMethod(Enum):
    """HTTP methods used by the amoCRM API."""
    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class Credentials:
    """Account credentials for one client session."""
    domain: str
    login: str
    apikey: str

    def to_dict(self) -> dict[str, str]:
        """Convert Credentials to the auth mapping of a ParamsBag."""
        return {
            "domain": self.domain,
            "login": self.login,
            "apikey": self.apikey,
        }


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Describes a single call before it is sent.

    Built per call by Request.describe(); never stored.
    """
    path: str
    method: HttpMethod
    modified_since: datetime | None = None


class AmoCRMError(Exception):
    """Base class for every error raised by the toolkit."""

    def __init__(self, message: str = "", code: int = 0):
        super().__init__(message)
        self.message = message
        self.code = code


class NetworkError(AmoCRMError):
    """Raised when the HTTP call fails below the application level."""
    pass


class ApiError(AmoCRMError):
    """Raised when the server rejects a request."""
    pass


class FormatError(AmoCRMError):
    """Raised when an IF-MODIFIED-SINCE value cannot be parsed."""
    pass


class ConfigError(AmoCRMError):
    """Raised when client configuration is missing or invalid."""
    pass


class ModelNotFoundError(AmoCRMError, AttributeError):
    """Raised when a resource name is not in the registry."""
    pass
