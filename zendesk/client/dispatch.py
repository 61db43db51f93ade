"""Request dispatch for every endpoint except oauth/tokens."""

from __future__ import annotations

import json
import logging
from contextlib import ExitStack
from pathlib import Path
from typing import TYPE_CHECKING, Any

from zendesk.client.debug import DebugSnapshot
from zendesk.client.errors import ApiResponseError, ResponseDecodeError
from zendesk.client.options import RequestOptions

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from zendesk.client import ZendeskClient

logger = logging.getLogger(__name__)


def send_with_options(
    client: ZendeskClient,
    endpoint: str,
    options: RequestOptions | Mapping[str, Any] | None = None,
) -> Any:
    """Send a request to ``client.api_url + endpoint`` and return the decoded JSON body.

    Args:
        client: Client providing the base URL, transport and debug slot
        endpoint: Path below the API root, e.g. "/tickets.json"
        options: RequestOptions or a mapping of its fields; missing fields
            take the defaults (GET, application/json, no body)

    Returns:
        Decoded JSON body, or None when the response has no body

    Raises:
        TransportError: The request could not be sent
        ApiResponseError: The API answered with a 4xx/5xx status
        ResponseDecodeError: A successful response carried a non-JSON body
    """
    opts = RequestOptions.merge(options)
    url = client.api_url + endpoint

    with ExitStack() as stack:
        content: Any = None
        if opts.post_fields:
            content = json.dumps(opts.post_fields)
        elif opts.file:
            path = Path(opts.file)
            if path.is_file():
                logger.debug("streaming file: %s", path)
                content = stack.enter_context(path.open("rb"))
            else:
                logger.debug("file not found, sending without body: %s", path)

        response = client.transport.send(
            opts.method,
            url,
            headers=opts.headers(),
            params=opts.query_params,
            content=content,
        )

    try:
        body = decode_body(response)
    except ResponseDecodeError:
        client.set_debug(DebugSnapshot.from_response(response))
        raise

    client.set_debug(DebugSnapshot.from_response(response, body))

    if response.is_error:
        logger.error("%s %s → %d: %s", opts.method, endpoint, response.status_code, response.text[:200])
        raise ApiResponseError(response.status_code, str(response.url), body, client.debug)

    return body


def decode_body(response: httpx.Response) -> Any:
    """Decode a JSON body; empty bodies give None, error pages fall back to text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        if response.is_error:
            return response.text
        raise ResponseDecodeError(f"invalid JSON from {response.url}: {response.text[:200]!r}") from e
