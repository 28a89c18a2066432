"""Resource registry mapping API resource names to model classes."""

import logging
from typing import Callable, TypeVar

from .models import ModelNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)

# In-memory storage for registered resource models
_RESOURCES: dict[str, type] = {}


def register_resource(name: str, model_cls: type) -> type:
    """
    Register a resource model class under a name.

    Args:
        name: Resource identifier used by the client (e.g., "lead")
        model_cls: Class constructed for that resource

    Returns:
        The registered class

    Note:
        If name already exists, it will be overwritten.
    """
    if name in _RESOURCES:
        logger.warning(f"Resource '{name}' already exists. Overwriting.")

    _RESOURCES[name] = model_cls
    logger.debug(f"Registered resource: {name} ({model_cls.__name__})")

    return model_cls


def resource(name: str) -> Callable[[T], T]:
    """Class decorator form of register_resource."""

    def decorator(model_cls: T) -> T:
        register_resource(name, model_cls)
        return model_cls

    return decorator


def get_resource(name: str) -> type:
    """
    Retrieve a resource model class from the registry.

    Args:
        name: Resource identifier

    Returns:
        The model class registered under name

    Raises:
        ModelNotFoundError: If the resource is not in the registry
    """
    if name not in _RESOURCES:
        raise ModelNotFoundError(f"Model not exists: {name}")

    return _RESOURCES[name]


def list_resources() -> list[str]:
    """
    List all registered resource names.

    Returns:
        Sorted list of resource names
    """
    return sorted(_RESOURCES)


def reset_registry() -> None:
    """
    Clear all resources from the registry.

    This is primarily intended for testing.
    """
    global _RESOURCES
    _RESOURCES = {}
    logger.debug("Registry reset")
