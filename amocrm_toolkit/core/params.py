"""Parameter store shared by requests of one resource model."""

import copy
from typing import Any, Literal, Mapping

from .models import Credentials

AuthKey = Literal["domain", "login", "apikey"]


class ParamsBag:
    """
    Holds auth credentials, GET query parameters and POST body fields.

    GET and POST values accumulate across calls until cleared; the same
    key written twice keeps the last value.
    """

    def __init__(self):
        self._auth: dict[str, str] = {}
        self._get: dict[str, Any] = {}
        self._post: dict[str, Any] = {}

    @classmethod
    def from_credentials(cls, credentials: Credentials) -> "ParamsBag":
        """Create a bag with the auth group filled from credentials."""
        bag = cls()
        for key, value in credentials.to_dict().items():
            bag.set_auth(key, value)
        return bag

    def set_auth(self, key: AuthKey, value: str) -> "ParamsBag":
        """Store one credential field. Only domain, login and apikey are read."""
        self._auth[key] = value
        return self

    add_auth = set_auth

    def get_auth(self, key: str, default: str = "") -> str:
        return self._auth.get(key, default)

    def add_get(self, key: str | Mapping[str, Any], value: Any = None) -> "ParamsBag":
        """Merge one query parameter, or a whole mapping of them."""
        _merge(self._get, key, value)
        return self

    def add_post(self, key: str | Mapping[str, Any], value: Any = None) -> "ParamsBag":
        """Merge one body field, or a whole mapping of them."""
        _merge(self._post, key, value)
        return self

    def get_get(self) -> dict[str, Any]:
        return dict(self._get)

    def get_post(self) -> dict[str, Any]:
        return dict(self._post)

    def has_get(self) -> bool:
        return bool(self._get)

    def has_post(self) -> bool:
        return bool(self._post)

    def clear_get(self) -> None:
        self._get.clear()

    def clear_post(self) -> None:
        self._post.clear()

    def clear(self) -> None:
        """Drop GET and POST values, keeping credentials."""
        self.clear_get()
        self.clear_post()

    def copy(self) -> "ParamsBag":
        """Return an independent bag with the same values."""
        bag = ParamsBag()
        bag._auth = dict(self._auth)
        bag._get = copy.deepcopy(self._get)
        bag._post = copy.deepcopy(self._post)
        return bag

    def __repr__(self) -> str:
        # apikey is never rendered
        return (
            f"ParamsBag(domain={self.get_auth('domain')!r}, "
            f"login={self.get_auth('login')!r}, get={self._get!r}, post={self._post!r})"
        )


def _merge(target: dict[str, Any], key: str | Mapping[str, Any], value: Any) -> None:
    if isinstance(key, Mapping):
        target.update(key)
    else:
        target[key] = value
