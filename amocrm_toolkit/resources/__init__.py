"""Resource models for amoCRM entities."""

from ..core.registry import register_resource
from .base import ResourceModel
from .account import Account
from .entities import (
    Catalog,
    CatalogElement,
    Company,
    Contact,
    Customer,
    CustomersPeriods,
    CustomField,
    Lead,
    Links,
    Note,
    Pipelines,
    Task,
    Transaction,
    WebHooks,
    Widgets,
)
from .legacy import Call, Unsorted

BUILTIN_RESOURCES: dict[str, type[ResourceModel]] = {
    "account": Account,
    "call": Call,
    "catalog": Catalog,
    "catalog_element": CatalogElement,
    "company": Company,
    "contact": Contact,
    "customer": Customer,
    "customers_periods": CustomersPeriods,
    "custom_field": CustomField,
    "lead": Lead,
    "links": Links,
    "note": Note,
    "pipelines": Pipelines,
    "task": Task,
    "transaction": Transaction,
    "unsorted": Unsorted,
    "webhooks": WebHooks,
    "widgets": Widgets,
}


def register_builtin_resources() -> None:
    """Register every built-in resource model."""
    for name, model_cls in BUILTIN_RESOURCES.items():
        register_resource(name, model_cls)


register_builtin_resources()

__all__ = [
    "ResourceModel",
    "BUILTIN_RESOURCES",
    "register_builtin_resources",
    "Account",
    "Call",
    "Catalog",
    "CatalogElement",
    "Company",
    "Contact",
    "Customer",
    "CustomersPeriods",
    "CustomField",
    "Lead",
    "Links",
    "Note",
    "Pipelines",
    "Task",
    "Transaction",
    "Unsorted",
    "WebHooks",
    "Widgets",
]
