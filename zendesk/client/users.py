"""User endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zendesk.client import ZendeskClient


class UsersAPI:
    def __init__(self, client: ZendeskClient) -> None:
        self._client = client

    def find_all(self, sideload: Sequence[str] | None = None, **iterators: Any) -> dict[str, Any]:
        """List users (``users`` plus paging links)."""
        return self._client.get("/users.json", sideload=sideload, iterators=iterators)  # type: ignore[no-any-return]

    def find(self, user_id: int, sideload: Sequence[str] | None = None) -> dict[str, Any]:
        return self._client.get(f"/users/{user_id}.json", sideload=sideload)["user"]  # type: ignore[no-any-return]

    def me(self) -> dict[str, Any]:
        """The authenticated user."""
        return self._client.get("/users/me.json")["user"]  # type: ignore[no-any-return]

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        return self._client.post("/users.json", {"user": fields})["user"]  # type: ignore[no-any-return]
