"""OAuth authorization-code exchange against /oauth/tokens."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from zendesk.client.debug import DebugSnapshot
from zendesk.client.dispatch import decode_body
from zendesk.client.errors import ConfigError, ResponseDecodeError, TransportError
from zendesk.config import (
    OAUTH_MAX_REDIRECTS,
    OAUTH_SCOPE,
    OAUTH_TIMEOUT,
    OAUTH_TOKEN_PATH,
    load_oauth_settings,
)

if TYPE_CHECKING:
    from zendesk.client import ZendeskClient

logger = logging.getLogger(__name__)


def _log_request(request: httpx.Request) -> None:
    logger.debug("> %s %s", request.method, request.url)
    for name, value in request.headers.items():
        if name.lower() != "authorization":
            logger.debug("> %s: %s", name, value)


def _log_response(response: httpx.Response) -> None:
    logger.debug("< %s %d %s", response.http_version, response.status_code, response.reason_phrase)
    for name, value in response.headers.items():
        logger.debug("< %s: %s", name, value)


def create_oauth_client() -> httpx.Client:
    """Low-level handle for the token exchange: no TLS verification, up to 3 redirects.

    The 30s limit applies to each phase (connect, read, write, pool) separately;
    httpx has no single whole-request deadline.
    """
    return httpx.Client(
        timeout=httpx.Timeout(OAUTH_TIMEOUT, connect=OAUTH_TIMEOUT),
        verify=False,  # noqa: S501
        follow_redirects=True,
        max_redirects=OAUTH_MAX_REDIRECTS,
        event_hooks={"request": [_log_request], "response": [_log_response]},
    )


def build_redirect_uri(host: str, path: str = "/", *, https: bool = True) -> str:
    """Rebuild the redirect URI of the page that received the authorization code."""
    scheme = "https" if https else "http"
    if not path.startswith("/"):
        path = "/" + path
    return f"{scheme}://{host}{path}"


class OAuthExchanger:
    """Exchange an authorization code for an access token.

    A handle passed in is reused and left open for its owner; otherwise a
    fresh one is created for each exchange and closed afterwards.

    Usage::

        token = OAuthExchanger().exchange(client, code, "my_app", "s3cret", "https://app.example.com/oauth")
        print(token["access_token"])
    """

    def __init__(self, transport: httpx.Client | None = None) -> None:
        self._transport = transport

    def exchange(
        self,
        client: ZendeskClient,
        code: str,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        scope: str = OAUTH_SCOPE,
    ) -> Any:
        """POST the code to /oauth/tokens and return the decoded token response.

        Errors reported by the token endpoint (e.g. ``invalid_grant``) are
        returned as-is and also stored in ``client.debug.error``.

        Raises:
            TransportError: The request could not be sent
            ResponseDecodeError: A successful reply was not JSON (the snapshot is still recorded)
        """
        url = client.base_url + OAUTH_TOKEN_PATH
        payload = {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": redirect_uri,
            "scope": scope,
        }

        handle = self._transport if self._transport is not None else create_oauth_client()
        try:
            logger.debug("POST %s", url)
            response = handle.post(
                url,
                content=json.dumps(payload),
                headers={"Content-Type": "application/json"},
            )
        except httpx.RequestError as e:
            logger.error("POST %s connection failed: %s", url, e)
            raise TransportError(f'Transport error message: "{e}" in {type(self).__name__}.exchange') from e
        finally:
            if self._transport is None:
                handle.close()

        try:
            body = decode_body(response)
        except ResponseDecodeError:
            client.set_debug(DebugSnapshot.from_response(response))
            raise
        client.set_debug(DebugSnapshot.from_response(response, body))

        if client.debug.error is not None:
            logger.warning("token exchange failed: %d %s", response.status_code, client.debug.error)
        else:
            logger.info("token exchange succeeded for %s", client.subdomain)
        return body


def oauth(
    client: ZendeskClient,
    code: str,
    client_id: str,
    client_secret: str,
    redirect_uri: str | None = None,
) -> Any:
    """Exchange ``code`` with a one-off handle, using the configured redirect URI when none is given."""
    redirect_uri = redirect_uri or load_oauth_settings().redirect_uri
    if not redirect_uri:
        raise ConfigError("redirect_uri is required (pass it or set ZENDESK_OAUTH_REDIRECT_URI)")
    return OAuthExchanger().exchange(client, code, client_id, client_secret, redirect_uri)
