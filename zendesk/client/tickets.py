"""Ticket endpoints."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zendesk.client import ZendeskClient

logger = logging.getLogger(__name__)


class TicketsAPI:
    def __init__(self, client: ZendeskClient) -> None:
        self._client = client

    def find_all(self, sideload: Sequence[str] | None = None, **iterators: Any) -> dict[str, Any]:
        """List tickets; response has ``tickets``, ``next_page``, ``previous_page`` and ``count``."""
        result: dict[str, Any] = self._client.get("/tickets.json", sideload=sideload, iterators=iterators)
        logger.info("found %d ticket(s)", len(result.get("tickets", [])))
        return result

    def find(self, ticket_id: int, sideload: Sequence[str] | None = None) -> dict[str, Any]:
        return self._client.get(f"/tickets/{ticket_id}.json", sideload=sideload)["ticket"]  # type: ignore[no-any-return]

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Create a ticket from ``subject``, ``comment``, ``requester_id`` etc."""
        ticket: dict[str, Any] = self._client.post("/tickets.json", {"ticket": fields})["ticket"]
        logger.info("created ticket %s", ticket.get("id"))
        return ticket

    def update(self, ticket_id: int, fields: dict[str, Any]) -> dict[str, Any]:
        return self._client.put(f"/tickets/{ticket_id}.json", {"ticket": fields})["ticket"]  # type: ignore[no-any-return]

    def delete(self, ticket_id: int) -> None:
        self._client.delete(f"/tickets/{ticket_id}.json")
        logger.info("deleted ticket %s", ticket_id)
