"""HTTP transport layer wrapping httpx."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

import httpx

from zendesk import __version__
from zendesk.client.errors import TransportError
from zendesk.config import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

USER_AGENT = f"zendesk-api-client/{__version__}"


class BearerAuth(httpx.Auth):
    """OAuth access token sent as ``Authorization: Bearer``."""

    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def build_auth(
    username: str | None = None,
    token: str | None = None,
    oauth_token: str | None = None,
) -> httpx.Auth | None:
    """Pick the auth scheme: OAuth bearer wins over an API token, else anonymous."""
    if oauth_token:
        return BearerAuth(oauth_token)
    if username and token:
        return httpx.BasicAuth(f"{username}/token", token)
    return None


class HttpTransport:
    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        auth: httpx.Auth | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = client is None
        self._auth = auth
        self._client = client or httpx.Client(timeout=timeout)
        logger.debug("transport ready (timeout=%s)", timeout)

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        content: Any = None,
    ) -> httpx.Response:
        logger.debug("%s %s", method, url)
        # Applied per request; an injected client keeps only its own timeout
        kwargs: dict[str, Any] = {}
        if self._auth is not None:
            kwargs["auth"] = self._auth
        headers = {"User-Agent": USER_AGENT, **(headers or {})}
        try:
            r = self._client.request(method, url, headers=headers, params=params or None, content=content, **kwargs)
        except httpx.RequestError as e:
            logger.error("%s %s connection failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e
        logger.debug("%s %s → %d", method, url, r.status_code)
        return r

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
            logger.debug("transport closed")
