"""zendesk: Zendesk REST API client and zd command line tool."""

__version__ = "0.3.0"

from zendesk.cli import main
from zendesk.client import (
    ApiResponseError,
    DebugSnapshot,
    OAuthExchanger,
    RequestOptions,
    TransportError,
    ZendeskClient,
    ZendeskError,
    oauth,
    prepare_query_params,
    send_with_options,
)
from zendesk.config import (
    CONFIG_DIR,
    CONFIG_FILE,
    build_api_url,
    load_config,
    load_credentials,
    save_config,
)

__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "ApiResponseError",
    "DebugSnapshot",
    "OAuthExchanger",
    "RequestOptions",
    "TransportError",
    "ZendeskClient",
    "ZendeskError",
    "build_api_url",
    "load_config",
    "load_credentials",
    "main",
    "oauth",
    "prepare_query_params",
    "save_config",
    "send_with_options",
]
