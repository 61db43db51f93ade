"""Zendesk REST API client: modular, httpx-based."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import httpx

from zendesk.client._http import HttpTransport, build_auth
from zendesk.client.attachments import AttachmentsAPI
from zendesk.client.debug import DebugSnapshot
from zendesk.client.dispatch import send_with_options
from zendesk.client.errors import (
    ApiResponseError,
    ConfigError,
    ResponseDecodeError,
    TransportError,
    ZendeskError,
)
from zendesk.client.oauth import OAuthExchanger, build_redirect_uri, oauth
from zendesk.client.options import RequestOptions
from zendesk.client.query import prepare_query_params
from zendesk.client.tickets import TicketsAPI
from zendesk.client.users import UsersAPI
from zendesk.config import (
    DEFAULT_HOSTNAME,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT,
    build_api_url,
    load_credentials,
)

__all__ = [
    "ApiResponseError",
    "ConfigError",
    "DebugSnapshot",
    "OAuthExchanger",
    "RequestOptions",
    "ResponseDecodeError",
    "TransportError",
    "ZendeskClient",
    "ZendeskError",
    "build_redirect_uri",
    "oauth",
    "prepare_query_params",
    "send_with_options",
]


class ZendeskClient:
    """Composite client for one Zendesk account.

    Usage::

        with ZendeskClient("acme", username="agent@acme.com", token="...") as zd:
            page = zd.tickets.find_all(sideload=["users"], per_page=50)
            print(zd.debug.status_code)
    """

    def __init__(
        self,
        subdomain: str,
        *,
        username: str | None = None,
        token: str | None = None,
        oauth_token: str | None = None,
        hostname: str = DEFAULT_HOSTNAME,
        scheme: str = DEFAULT_SCHEME,
        api_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        if not subdomain:
            raise ConfigError("subdomain is required")
        self.subdomain = subdomain
        self.hostname = hostname
        self.scheme = scheme
        self.api_url = api_url or build_api_url(subdomain, hostname, scheme)
        self.transport = HttpTransport(
            timeout=timeout,
            auth=build_auth(username, token, oauth_token),
            client=http_client,
        )
        self.debug = DebugSnapshot()
        self.tickets = TicketsAPI(self)
        self.users = UsersAPI(self)
        self.attachments = AttachmentsAPI(self)

    @classmethod
    def from_config(cls, **overrides: Any) -> ZendeskClient:
        """Build a client from ZENDESK_* env vars / config.toml; keyword overrides win."""
        creds = load_credentials()
        kwargs: dict[str, Any] = {
            "username": creds.username,
            "token": creds.token,
            "oauth_token": creds.oauth_token,
            "hostname": creds.hostname,
            "scheme": creds.scheme,
        }
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        subdomain = kwargs.pop("subdomain", None) or creds.subdomain
        if not subdomain:
            raise ConfigError("no subdomain configured; set ZENDESK_SUBDOMAIN or run `zd config --set-subdomain`")
        return cls(subdomain, **kwargs)

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.subdomain}.{self.hostname}"

    def set_debug(self, snapshot: DebugSnapshot) -> None:
        self.debug = snapshot

    # -- request helpers -----------------------------------------------------

    def request(self, endpoint: str, options: RequestOptions | Mapping[str, Any] | None = None) -> Any:
        return send_with_options(self, endpoint, options)

    def get(
        self,
        endpoint: str,
        query_params: Mapping[str, Any] | None = None,
        *,
        sideload: Sequence[str] | None = None,
        iterators: Mapping[str, Any] | None = None,
    ) -> Any:
        params = dict(query_params or {})
        params.update(prepare_query_params(sideload, iterators))
        return send_with_options(self, endpoint, RequestOptions(query_params=params))

    def post(self, endpoint: str, post_fields: Mapping[str, Any] | None = None) -> Any:
        return send_with_options(self, endpoint, RequestOptions(method="POST", post_fields=dict(post_fields or {})))

    def put(self, endpoint: str, post_fields: Mapping[str, Any] | None = None) -> Any:
        return send_with_options(self, endpoint, RequestOptions(method="PUT", post_fields=dict(post_fields or {})))

    def delete(self, endpoint: str) -> Any:
        return send_with_options(self, endpoint, RequestOptions(method="DELETE"))

    def upload(
        self,
        endpoint: str,
        file: str | Path,
        content_type: str = "application/binary",
        query_params: Mapping[str, Any] | None = None,
    ) -> Any:
        options = RequestOptions(
            method="POST",
            content_type=content_type,
            query_params=dict(query_params or {}),
            file=file,
        )
        return send_with_options(self, endpoint, options)

    def oauth(self, code: str, client_id: str, client_secret: str, redirect_uri: str | None = None) -> Any:
        """Exchange an authorization code for an access token (see ``zendesk.client.oauth``)."""
        return oauth(self, code, client_id, client_secret, redirect_uri)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> ZendeskClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
