"""Exceptions raised by the Zendesk client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zendesk.client.debug import DebugSnapshot


class ZendeskError(Exception):
    """Base class for all client errors."""


class ConfigError(ZendeskError):
    """Required configuration (e.g. the subdomain) is missing."""


class TransportError(ZendeskError):
    """The request never produced a response (DNS, connect, timeout, TLS)."""


class ResponseDecodeError(ZendeskError):
    """The response body was not valid JSON."""


class ApiResponseError(ZendeskError):
    """The API answered with a 4xx/5xx status."""

    def __init__(
        self,
        status_code: int,
        url: str,
        body: Any = None,
        debug: DebugSnapshot | None = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        self.body = body
        self.debug = debug
        super().__init__(f"{status_code} from {url}: {_describe(body)}")


def _describe(body: Any) -> str:
    if isinstance(body, dict):
        error = body.get("error")
        description = body.get("description") or body.get("error_description")
        if isinstance(error, dict):
            return str(error.get("message") or error.get("title") or error)
        if error and description:
            return f"{error} ({description})"
        if error:
            return str(error)
    if body is None:
        return "no body"
    return str(body)[:200]
