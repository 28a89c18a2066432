"""Resources served by the older API, which uses the legacy auth scheme."""

from typing import Any, Iterable, Mapping

from ..core.models import AuthScheme
from .base import ResourceModel


class Call(ResourceModel):
    """Telephony call records."""

    scheme = AuthScheme.LEGACY
    resource_key = "calls"
    add_path = "/api/calls/add/"

    def api_add_calls(self, code: str, key: str, calls: Iterable[Mapping[str, Any]]) -> Any:
        """
        Upload call records from a telephony widget.

        Args:
            code: Widget code
            key: Widget secret key
            calls: Call dicts (account_id, uniq, phone_number, ...)

        Returns:
            The server response, or None for no data
        """
        self.parameters.add_get({"code": code, "key": key})
        return self.post_request(self.add_path, {"add": [dict(call) for call in calls]})


class Unsorted(ResourceModel):
    """Incoming requests waiting for manual review."""

    scheme = AuthScheme.LEGACY
    resource_key = "unsorted"
    list_path = "/api/unsorted/list/"
    summary_path = "/api/unsorted/get_all_summary/"
    accept_path = "/api/unsorted/accept/"
    decline_path = "/api/unsorted/decline/"
    add_path = "/api/unsorted/add/"

    def api_all_summary(self) -> dict[str, Any]:
        """Get counters for unsorted requests by category."""
        response = self.get_request(self.summary_path)
        return response if isinstance(response, dict) else {}

    def api_accept(self, uids: Iterable[str], user_id: int, status_id: int | None = None) -> Any:
        """
        Accept unsorted requests, turning them into leads.

        Args:
            uids: Unsorted request identifiers
            user_id: User performing the action
            status_id: Lead status for the created leads
        """
        fields: dict[str, Any] = {"accept": list(uids), "user_id": user_id}
        if status_id is not None:
            fields["status_id"] = status_id
        return self.post_request(self.accept_path, {self.resource_key: fields})

    def api_decline(self, uids: Iterable[str], user_id: int) -> Any:
        """Decline unsorted requests."""
        return self.post_request(self.decline_path, {
            self.resource_key: {"decline": list(uids), "user_id": user_id},
        })

    def api_add(self, items: Mapping[str, Any] | Iterable[Mapping[str, Any]], category: str = "forms") -> list[str]:
        """
        Add unsorted requests.

        Args:
            items: A request dict or a list of them
            category: "forms", "mail" or "sip"

        Returns:
            Identifiers of the created requests
        """
        entries = [dict(items)] if isinstance(items, Mapping) else [dict(item) for item in items]
        response = self.post_request(self.add_path, {
            self.resource_key: {"category": category, "add": entries},
        })

        added = self._block(response, "add")
        if isinstance(added, dict):
            return list(added.get("data") or [])
        return []
