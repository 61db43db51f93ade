"""Configuration and constants for the Zendesk client."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# ============================================================================
# XDG Base Directory Configuration
# ============================================================================

# Config: ~/.config/zendesk/config.toml
CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "zendesk"
CONFIG_FILE = CONFIG_DIR / "config.toml"

# ============================================================================
# API Constants
# ============================================================================

DEFAULT_SCHEME = "https"
DEFAULT_HOSTNAME = "zendesk.com"
API_PATH = "/api/v2"
DEFAULT_TIMEOUT = 60.0

OAUTH_TOKEN_PATH = "/oauth/tokens"
OAUTH_TIMEOUT = 30.0
OAUTH_MAX_REDIRECTS = 3
OAUTH_SCOPE = "read"

# Collection iterators accepted by list endpoints
ITERATOR_KEYS = ("per_page", "page", "sort_order", "sort_by")


# ============================================================================
# Config Functions
# ============================================================================


def load_config() -> dict[str, Any]:
    """Load configuration from TOML config file."""
    if CONFIG_FILE.exists():
        with CONFIG_FILE.open("rb") as f:
            return tomllib.load(f)
    return {}


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to TOML config file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    # Top-level keys must come before the first [table] header
    lines = [f"{key} = {_toml_value(value)}" for key, value in config.items() if not isinstance(value, dict)]
    for key, value in config.items():
        if isinstance(value, dict):
            if lines:
                lines.append("")
            lines.append(f"[{key}]")
            lines.extend(f"{k} = {_toml_value(v)}" for k, v in value.items())

    CONFIG_FILE.write_text("\n".join(lines) + "\n")


def _toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


def _lookup(env_var: str, section: str, key: str) -> str | None:
    """Resolve a setting: env var -> config file section -> None."""
    env_value = os.environ.get(env_var)
    if env_value:
        return env_value

    config = load_config()
    section_data = config.get(section, {})
    if isinstance(section_data, dict):
        value = section_data.get(key)
        if value:
            return str(value)
    return None


@dataclass
class Credentials:
    """Account settings resolved from the environment and config file."""

    subdomain: str | None = None
    username: str | None = None
    token: str | None = None
    oauth_token: str | None = None
    hostname: str = DEFAULT_HOSTNAME
    scheme: str = DEFAULT_SCHEME


@dataclass
class OAuthSettings:
    """OAuth application settings used for the code exchange."""

    client_id: str | None = None
    client_secret: str | None = None
    redirect_uri: str | None = None


def load_credentials() -> Credentials:
    """Load account credentials (ZENDESK_* env vars first, then [zendesk] in config)."""
    return Credentials(
        subdomain=_lookup("ZENDESK_SUBDOMAIN", "zendesk", "subdomain"),
        username=_lookup("ZENDESK_USERNAME", "zendesk", "username"),
        token=_lookup("ZENDESK_API_TOKEN", "zendesk", "token"),
        oauth_token=_lookup("ZENDESK_OAUTH_TOKEN", "zendesk", "oauth_token"),
        hostname=_lookup("ZENDESK_HOSTNAME", "zendesk", "hostname") or DEFAULT_HOSTNAME,
        scheme=_lookup("ZENDESK_SCHEME", "zendesk", "scheme") or DEFAULT_SCHEME,
    )


def load_oauth_settings() -> OAuthSettings:
    """Load OAuth client settings (ZENDESK_OAUTH_* env vars first, then [oauth] in config)."""
    return OAuthSettings(
        client_id=_lookup("ZENDESK_OAUTH_CLIENT_ID", "oauth", "client_id"),
        client_secret=_lookup("ZENDESK_OAUTH_CLIENT_SECRET", "oauth", "client_secret"),
        redirect_uri=_lookup("ZENDESK_OAUTH_REDIRECT_URI", "oauth", "redirect_uri"),
    )


def build_api_url(subdomain: str, hostname: str = DEFAULT_HOSTNAME, scheme: str = DEFAULT_SCHEME) -> str:
    """Base URL that endpoint paths such as ``/tickets.json`` are appended to."""
    return f"{scheme}://{subdomain}.{hostname}{API_PATH}"
