"""Attachment uploads."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zendesk.client import ZendeskClient

logger = logging.getLogger(__name__)


class AttachmentsAPI:
    def __init__(self, client: ZendeskClient) -> None:
        self._client = client

    def upload(
        self,
        file: str | Path,
        name: str | None = None,
        token: str | None = None,
        content_type: str | None = None,
    ) -> dict[str, Any]:
        """Upload a file and return the ``upload`` record.

        Pass the ``token`` of a previous upload to attach several files to the
        same comment. A path that does not exist is sent as an empty upload.
        """
        path = Path(file)
        params: dict[str, Any] = {"filename": name or path.name}
        if token:
            params["token"] = token
        content_type = content_type or mimetypes.guess_type(path.name)[0] or "application/binary"

        logger.info("uploading %s (%s)", path, content_type)
        result: dict[str, Any] = self._client.upload("/uploads.json", path, content_type=content_type, query_params=params)
        return result["upload"]  # type: ignore[no-any-return]

    def delete(self, token: str) -> None:
        self._client.delete(f"/uploads/{token}.json")
