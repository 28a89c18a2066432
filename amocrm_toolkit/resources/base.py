"""Base class for amoCRM resource models."""

from typing import Any, Iterable, Mapping

from ..request.request import ModifiedSince, Request, parse_modified

API_V2 = "/private/api/v2/json"


class ResourceModel(Request):
    """
    A Request bound to one amoCRM entity.

    Subclasses set resource_key (the envelope key the server uses for the
    entity) and the list/set paths. A path left empty means the API has no
    such endpoint for the entity.
    """

    resource_key: str = ""
    list_path: str = ""
    set_path: str = ""

    def __str__(self) -> str:
        return type(self).__name__

    def _require(self, path: str, action: str) -> str:
        if not path:
            raise ValueError(f"No '{action}' endpoint configured for {self.resource_key or self}")
        return path

    def _block(self, response: Any, action: str) -> Any:
        if not isinstance(response, dict):
            return None
        section = response.get(self.resource_key)
        if not isinstance(section, dict):
            return None
        return section.get(action)

    def api_list(
        self,
        parameters: Mapping[str, Any] | None = None,
        modified: ModifiedSince = None,
    ) -> list[dict[str, Any]]:
        """
        List entities of this resource.

        Args:
            parameters: Query parameters for filtering (e.g., {"limit_rows": 50})
            modified: Only return entities changed since this date/time

        Returns:
            List of entity dicts (empty when the server has no data)
        """
        path = self._require(self.list_path, "list")
        response = self.get_request(path, parameters, modified)

        if not isinstance(response, dict):
            return []
        return response.get(self.resource_key) or []

    def api_add(self, items: Mapping[str, Any] | Iterable[Mapping[str, Any]]) -> Any:
        """
        Create one or more entities.

        Args:
            items: A single entity dict or a list of them

        Returns:
            The new id for a single entity, or the list of new ids
        """
        path = self._require(self.set_path, "add")
        single = isinstance(items, Mapping)
        entries = [dict(items)] if single else [dict(item) for item in items]

        response = self.post_request(path, {self.resource_key: {"add": entries}})

        added = self._block(response, "add") or []
        ids = [item.get("id") for item in added if isinstance(item, dict)]
        if single:
            return ids[0] if ids else None
        return ids

    def api_update(
        self,
        entity_id: int,
        fields: Mapping[str, Any],
        modified: ModifiedSince = "now",
    ) -> bool:
        """
        Update an existing entity.

        Args:
            entity_id: Entity identifier
            fields: Fields to change
            modified: Value sent as last_modified (defaults to now)

        Returns:
            True if the server accepted the update
        """
        path = self._require(self.set_path, "update")
        entry = dict(fields)
        entry["id"] = entity_id
        entry["last_modified"] = int(parse_modified(modified).timestamp())

        response = self.post_request(path, {self.resource_key: {"update": [entry]}})

        updated = self._block(response, "update")
        if updated is None:
            return False
        return not (isinstance(updated, dict) and updated.get("errors"))
