"""Entity resources served by the v2 JSON API."""

from typing import Any, Iterable, Mapping

from ..request.request import ModifiedSince
from .base import API_V2, ResourceModel


class Lead(ResourceModel):
    resource_key = "leads"
    list_path = f"{API_V2}/leads/list"
    set_path = f"{API_V2}/leads/set"


class Contact(ResourceModel):
    resource_key = "contacts"
    list_path = f"{API_V2}/contacts/list"
    set_path = f"{API_V2}/contacts/set"
    links_path = f"{API_V2}/contacts/links"

    def api_links(
        self,
        parameters: Mapping[str, Any] | None = None,
        modified: ModifiedSince = None,
    ) -> list[dict[str, Any]]:
        """List contact to lead links."""
        response = self.get_request(self.links_path, parameters, modified)
        if not isinstance(response, dict):
            return []
        return response.get("links") or []


class Company(ResourceModel):
    # Companies travel under the "contacts" key
    resource_key = "contacts"
    list_path = f"{API_V2}/company/list"
    set_path = f"{API_V2}/company/set"


class Task(ResourceModel):
    resource_key = "tasks"
    list_path = f"{API_V2}/tasks/list"
    set_path = f"{API_V2}/tasks/set"


class Note(ResourceModel):
    resource_key = "notes"
    list_path = f"{API_V2}/notes/list"
    set_path = f"{API_V2}/notes/set"


class CustomField(ResourceModel):
    """Custom fields. Listed through Account.api_current()."""

    resource_key = "fields"
    set_path = f"{API_V2}/fields/set"

    def api_delete(self, field_id: int, origin: str) -> bool:
        """
        Delete a custom field created by a widget or integration.

        Args:
            field_id: Field identifier
            origin: Origin string the field was created with
        """
        response = self.post_request(self.set_path, {
            self.resource_key: {"delete": [{"id": field_id, "origin": origin}]},
        })
        return bool(self._block(response, "delete"))


class Pipelines(ResourceModel):
    resource_key = "pipelines"
    list_path = f"{API_V2}/pipelines/list"
    set_path = f"{API_V2}/pipelines/set"
    delete_path = f"{API_V2}/pipelines/delete"

    def api_delete(self, pipeline_id: int) -> bool:
        """Delete a pipeline. Returns True if the server confirmed it."""
        response = self.post_request(self.delete_path, {"request": {"id": pipeline_id}})
        return bool(self._block(response, "delete"))


class Customer(ResourceModel):
    resource_key = "customers"
    list_path = f"{API_V2}/customers/list"
    set_path = f"{API_V2}/customers/set"


class CustomersPeriods(ResourceModel):
    resource_key = "customers_periods"
    list_path = f"{API_V2}/customers_periods/list"
    set_path = f"{API_V2}/customers_periods/set"


class Transaction(ResourceModel):
    resource_key = "transactions"
    list_path = f"{API_V2}/transactions/list"
    set_path = f"{API_V2}/transactions/set"


class Catalog(ResourceModel):
    resource_key = "catalogs"
    list_path = f"{API_V2}/catalogs/list"
    set_path = f"{API_V2}/catalogs/set"


class CatalogElement(ResourceModel):
    resource_key = "catalog_elements"
    list_path = f"{API_V2}/catalog_elements/list"
    set_path = f"{API_V2}/catalog_elements/set"


class Links(ResourceModel):
    resource_key = "links"
    list_path = f"{API_V2}/links/list"
    set_path = f"{API_V2}/links/set"


class Widgets(ResourceModel):
    resource_key = "widgets"
    list_path = f"{API_V2}/widgets/list"
    set_path = f"{API_V2}/widgets/set"


class WebHooks(ResourceModel):
    resource_key = "webhooks"
    list_path = f"{API_V2}/webhooks/list"
    subscribe_path = f"{API_V2}/webhooks/subscribe"
    unsubscribe_path = f"{API_V2}/webhooks/unsubscribe"

    def api_subscribe(self, url: str, events: Iterable[str]) -> list[dict[str, Any]]:
        """
        Subscribe a URL to account events.

        Args:
            url: Address that receives the webhook calls
            events: Event codes (e.g., ["add_lead", "update_contact"])

        Returns:
            Per-URL results reported by the server
        """
        return self._hook("subscribe", self.subscribe_path, url, events)

    def api_unsubscribe(self, url: str, events: Iterable[str]) -> list[dict[str, Any]]:
        """Unsubscribe a URL from account events."""
        return self._hook("unsubscribe", self.unsubscribe_path, url, events)

    def _hook(self, action: str, path: str, url: str, events: Iterable[str]) -> list[dict[str, Any]]:
        response = self.post_request(path, {
            self.resource_key: {action: [{"url": url, "events": list(events)}]},
        })
        return self._block(response, action) or []
