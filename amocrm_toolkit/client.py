"""
amoCRM client facade.

Holds the session credentials and hands out resource models by name.
"""

import logging
from typing import Any

import httpx

from .core.config import ClientSettings
from .core.models import Credentials
from .core.params import ParamsBag
from .core.registry import get_resource
from .request.request import Request

logger = logging.getLogger(__name__)


class AmoCRMClient:
    """
    Entry point for working with the amoCRM API.

    Every model returned by get_model() gets its own copy of the session
    parameters, so GET/POST values set on one model never reach another.

    Example:
        >>> with AmoCRMClient("example", "user@example.com", "hash") as amo:
        ...     leads = amo.lead.api_list({"limit_rows": 10})
    """

    def __init__(
        self,
        domain: str,
        login: str,
        apikey: str,
        settings: ClientSettings | None = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the client.

        Args:
            domain: amoCRM account subdomain
            login: User login (email)
            apikey: User API key
            settings: Client settings (defaults used if None)
            http_client: Optional httpx client shared by all models
        """
        self.credentials = Credentials(domain=domain, login=login, apikey=apikey)
        self.parameters = ParamsBag.from_credentials(self.credentials)
        self.settings = settings or ClientSettings()
        self.logger = logger

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(
                verify=self.settings.verify_ssl,
                timeout=self.settings.timeout_seconds,
            )
        else:
            self.http_client = http_client

    @classmethod
    def from_credentials(cls, credentials: Credentials, **kwargs: Any) -> "AmoCRMClient":
        return cls(credentials.domain, credentials.login, credentials.apikey, **kwargs)

    def set_logger(self, custom_logger: logging.Logger) -> None:
        """Use custom_logger for this client and every model it creates."""
        self.logger = custom_logger

    def get_model(self, name: str) -> Request:
        """
        Create a resource model by name.

        Args:
            name: Resource name (e.g., "lead", "catalog_element")

        Returns:
            A new model with its own copy of the session parameters

        Raises:
            ModelNotFoundError: If no model is registered under name
        """
        model_cls = get_resource(name)

        model = model_cls(
            self.parameters.copy(),
            settings=self.settings,
            http_client=self.http_client,
        )
        model.set_logger(self.logger)

        self.logger.debug(f"Created model {model_cls.__name__} for '{name}'")
        return model

    def __getattr__(self, name: str) -> Request:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get_model(name)

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager cleanup."""
        self.close()
        return False
