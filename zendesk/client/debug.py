"""Last-request diagnostics kept on the client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

_MASKED_HEADERS = ("authorization",)


@dataclass
class DebugSnapshot:
    """Headers, status and error payload of the most recent exchange."""

    request_headers: dict[str, str] = field(default_factory=dict)
    response_headers: dict[str, str] = field(default_factory=dict)
    status_code: int | None = None
    raw_headers: str = ""
    error: Any = None

    @classmethod
    def from_response(cls, response: httpx.Response, body: Any = None) -> DebugSnapshot:
        """Build a snapshot from a completed response and its decoded body."""
        return cls(
            request_headers=request_headers(response.request),
            response_headers=dict(response.headers),
            status_code=response.status_code,
            raw_headers=raw_header_block(response),
            error=error_payload(response.status_code, body),
        )


def request_headers(request: httpx.Request) -> dict[str, str]:
    """Outbound headers as sent, with credentials masked."""
    headers = {}
    for name, value in request.headers.items():
        if name.lower() in _MASKED_HEADERS:
            scheme = value.split(" ", 1)[0]
            value = f"{scheme} ***"
        headers[name] = value
    return headers


def raw_header_block(response: httpx.Response) -> str:
    """Status line plus header lines, as they appeared before the body."""
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    lines.extend(f"{name}: {value}" for name, value in response.headers.multi_items())
    return "\r\n".join(lines) + "\r\n\r\n"


def error_payload(status_code: int, body: Any) -> Any:
    """The API-reported error, if any: the whole body on an error status, or a body carrying ``error``."""
    if status_code >= 400:  # noqa: PLR2004
        return body
    if isinstance(body, dict) and "error" in body:
        return body
    return None
