from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, Union

UserId = Union[int, str]
Options = Mapping[str, Any]

SELF = "self"


class Transport(Protocol):
    def get(self, path: str, params: Options | None = None) -> dict[str, Any]: ...

    def post(self, path: str, params: Options | None = None) -> dict[str, Any]: ...


def _resolve(user_id: UserId | Options | None, options: Options | None) -> tuple[UserId, dict[str, Any]]:
    """Split ``(user_id, options)`` the way the optional-id endpoints accept them.

    A mapping passed in place of the id is the options, for the caller:
    ``get_follows({"count": 10})`` means the authenticated user's follows.
    """
    if isinstance(user_id, Mapping) and options is None:
        options, user_id = user_id, None
    if user_id is None:
        user_id = SELF
    return user_id, dict(options or {})


class UserResource:
    """Users endpoints. Every method returns the ``data`` field of the response."""

    def __init__(self, transport: Transport):
        self.transport = transport

    def get_user(self, user_id: UserId | None = None) -> Any:
        """Extended information for a user (the authenticated user by default)."""
        user_id = SELF if user_id is None else user_id
        return self.transport.get(f"users/{user_id}")["data"]

    def search_users(self, query: str, options: Options | None = None) -> Any:
        """Users matching ``query``. ``count`` caps the page size (max 100)."""
        params = dict(options or {})
        params["q"] = query
        return self.transport.get("users/search", params)["data"]

    def get_follows(self, user_id: UserId | Options | None = None, options: Options | None = None) -> Any:
        """Users that ``user_id`` follows. Pages with ``cursor`` and ``count``."""
        user_id, params = _resolve(user_id, options)
        return self.transport.get(f"users/{user_id}/follows", params)["data"]

    def get_followed_by(self, user_id: UserId | Options | None = None, options: Options | None = None) -> Any:
        user_id, params = _resolve(user_id, options)
        return self.transport.get(f"users/{user_id}/followed-by", params)["data"]

    def get_requested_by(self) -> Any:
        """Pending follow requests for the authenticated user."""
        return self.transport.get(f"users/{SELF}/requested-by")["data"]

    def get_self_feed(self, options: Options | None = None) -> Any:
        """Media feed of the authenticated user. Pages with ``max_id`` and ``count``."""
        return self.transport.get(f"users/{SELF}/feed", dict(options or {}))["data"]

    def get_recent_media(self, user_id: UserId | Options | None = None, options: Options | None = None) -> Any:
        user_id, params = _resolve(user_id, options)
        return self.transport.get(f"users/{user_id}/media/recent", params)["data"]

    def get_relationship(self, user_id: UserId, options: Options | None = None) -> Any:
        return self.transport.get(f"users/{user_id}/relationship", dict(options or {}))["data"]

    def set_relationship(self, user_id: UserId, action: str, options: Options | None = None) -> Any:
        """Change the relationship with ``user_id``.

        ``action`` is one of follow, unfollow, block, unblock, approve, ignore.
        """
        params = dict(options or {})
        params["action"] = action
        return self.transport.post(f"users/{user_id}/relationship", params)["data"]
