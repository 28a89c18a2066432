"""Account resource."""

from typing import Any, Mapping

from .base import API_V2, ResourceModel

# Top-level account fields kept by api_current(short=True)
SHORT_FIELDS = (
    "id",
    "name",
    "subdomain",
    "currency",
    "timezone",
    "language",
    "date_format",
    "time_format",
)


class Account(ResourceModel):
    """Information about the current account."""

    resource_key = "account"
    current_path = f"{API_V2}/accounts/current"

    def api_current(self, short: bool = False, parameters: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """
        Get account details, users, pipelines and custom fields.

        Args:
            short: Keep only the main fields and id/name pairs of nested lists
            parameters: Extra query parameters

        Returns:
            Account dict (empty when the server has no data)
        """
        response = self.get_request(self.current_path, parameters)
        if not isinstance(response, dict):
            return {}

        account = response.get(self.resource_key) or {}
        return shorten(account) if short else account


def shorten(account: dict[str, Any]) -> dict[str, Any]:
    result = {key: account[key] for key in SHORT_FIELDS if key in account}

    for key in ("users", "leads_statuses", "note_types", "task_types"):
        items = account.get(key)
        if isinstance(items, list):
            result[key] = [
                {"id": item.get("id"), "name": item.get("name")}
                for item in items
                if isinstance(item, dict)
            ]

    pipelines = account.get("pipelines")
    if isinstance(pipelines, dict):
        result["pipelines"] = [
            {"id": item.get("id"), "name": item.get("name")}
            for item in pipelines.values()
            if isinstance(item, dict)
        ]

    return result
