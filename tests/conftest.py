"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest
import respx

from zendesk import config
from zendesk.client import ZendeskClient

SUBDOMAIN = "acme"
BASE_URL = "https://acme.zendesk.com"
API_URL = f"{BASE_URL}/api/v2"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp dir and clear ZENDESK_* env vars."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.toml")
    for name in (
        "ZENDESK_SUBDOMAIN",
        "ZENDESK_USERNAME",
        "ZENDESK_API_TOKEN",
        "ZENDESK_OAUTH_TOKEN",
        "ZENDESK_HOSTNAME",
        "ZENDESK_SCHEME",
        "ZENDESK_OAUTH_CLIENT_ID",
        "ZENDESK_OAUTH_CLIENT_SECRET",
        "ZENDESK_OAUTH_REDIRECT_URI",
    ):
        monkeypatch.delenv(name, raising=False)
    return config_dir / "config.toml"


@pytest.fixture()
def mock_api():
    """Activate respx mock for the account's API root."""
    with respx.mock(base_url=API_URL, assert_all_called=False) as rsps:
        yield rsps


@pytest.fixture()
def client(mock_api: respx.MockRouter) -> ZendeskClient:  # noqa: ARG001
    """ZendeskClient wired to the mocked transport."""
    c = ZendeskClient(SUBDOMAIN, username="agent@acme.com", token="abc123")
    yield c  # type: ignore[misc]
    c.close()
