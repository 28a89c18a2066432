"""Client settings and environment-based configuration."""

import logging
import os
from dataclasses import dataclass

from .models import Credentials, ConfigError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class ClientSettings:
    """
    Tunables shared by every request of a client session.

    TLS verification is off by default because older amoCRM accounts were
    served with self-signed certificates. Turn it on for modern accounts.
    """
    verify_ssl: bool = False
    timeout_seconds: float = 10.0
    clear_params_after_request: bool = False
    base_host: str = "amocrm.ru"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: '{raw}'")


def settings_from_env() -> ClientSettings:
    """
    Build ClientSettings from environment variables.

    Reads:
        AMOCRM_VERIFY_SSL: Enable TLS certificate verification
        AMOCRM_TIMEOUT: Request timeout in seconds
        AMOCRM_CLEAR_PARAMS: Clear GET/POST values after each request

    Raises:
        ConfigError: If a variable holds an invalid value
    """
    settings = ClientSettings()
    settings.verify_ssl = _env_bool("AMOCRM_VERIFY_SSL", settings.verify_ssl)
    settings.clear_params_after_request = _env_bool(
        "AMOCRM_CLEAR_PARAMS", settings.clear_params_after_request
    )

    timeout = os.environ.get("AMOCRM_TIMEOUT")
    if timeout:
        try:
            settings.timeout_seconds = float(timeout)
        except ValueError as e:
            raise ConfigError(f"Invalid timeout in AMOCRM_TIMEOUT: '{timeout}'") from e

    logger.debug(f"Loaded settings from environment: {settings}")
    return settings


def credentials_from_env() -> Credentials:
    """
    Build Credentials from AMOCRM_DOMAIN, AMOCRM_LOGIN and AMOCRM_APIKEY.

    Raises:
        ConfigError: If any of the variables is missing or empty
    """
    names = ("AMOCRM_DOMAIN", "AMOCRM_LOGIN", "AMOCRM_APIKEY")
    missing = [name for name in names if not os.environ.get(name)]
    if missing:
        raise ConfigError(f"Missing environment variables: {', '.join(missing)}")

    return Credentials(
        domain=os.environ["AMOCRM_DOMAIN"],
        login=os.environ["AMOCRM_LOGIN"],
        apikey=os.environ["AMOCRM_APIKEY"],
    )


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for scripts using the toolkit."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
    # Suppress httpx INFO logs for cleaner output
    logging.getLogger("httpx").setLevel(logging.WARNING)
