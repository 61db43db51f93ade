"""CLI application and commands for zd."""

from __future__ import annotations

import json
import logging
import sys
from importlib.metadata import version
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from zendesk import config as zd_config
from zendesk.client import (
    ApiResponseError,
    OAuthExchanger,
    RequestOptions,
    ZendeskClient,
    ZendeskError,
    prepare_query_params,
)
from zendesk.config import (
    load_config,
    load_credentials,
    load_oauth_settings,
    save_config,
)
from zendesk.display import display_debug, display_json, mask_secret


def _version_callback(value: bool) -> None:
    if value:
        print(f"zd {version('zendesk-api-client')}")
        raise typer.Exit


app = typer.Typer(
    name="zd",
    help="Call the Zendesk REST API from the command line.",
    no_args_is_help=True,
)


@app.callback()
def _main(
    _version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log HTTP traffic to stderr.")] = False,
) -> None:
    """Call the Zendesk REST API from the command line."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


console = Console()


def _parse_params(params: list[str] | None) -> dict[str, str]:
    """Parse repeated KEY=VALUE options."""
    result: dict[str, str] = {}
    for item in params or []:
        if "=" not in item:
            console.print(f"[red]Error: Use format KEY=VALUE (got '{item}')[/red]")
            raise typer.Exit(1)
        key, value = item.split("=", 1)
        result[key.strip()] = value
    return result


def _fail(e: ZendeskError, client: ZendeskClient | None = None, show_debug: bool = False) -> typer.Exit:
    console.print(f"[red]Error: {e}[/red]")
    if isinstance(e, ApiResponseError) and e.body is not None and not show_debug:
        display_json(e.body, console)
    if client is not None and show_debug:
        display_debug(client.debug, console)
    return typer.Exit(1)


@app.command()
def request(
    endpoint: Annotated[str, typer.Argument(help="Endpoint below /api/v2, e.g. /tickets.json")],
    method: Annotated[str, typer.Option("--method", "-X", help="HTTP method")] = "GET",
    data: Annotated[str | None, typer.Option("--data", "-d", help="JSON body")] = None,
    file: Annotated[Path | None, typer.Option("--file", "-f", help="File to send as the body")] = None,
    content_type: Annotated[str, typer.Option("--content-type", help="Content-Type header")] = "application/json",
    include: Annotated[str | None, typer.Option("--include", help="Side-load, comma separated (users,groups)")] = None,
    per_page: Annotated[int | None, typer.Option("--per-page", help="Page size")] = None,
    page: Annotated[int | None, typer.Option("--page", help="Page number")] = None,
    sort_by: Annotated[str | None, typer.Option("--sort-by", help="Sort field")] = None,
    sort_order: Annotated[str | None, typer.Option("--sort-order", help="asc or desc")] = None,
    param: Annotated[list[str] | None, typer.Option("--param", "-p", help="Extra query param KEY=VALUE")] = None,
    subdomain: Annotated[str | None, typer.Option("--subdomain", "-s", help="Account subdomain")] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Show request/response headers")] = False,
) -> None:
    """Send a request and print the JSON response."""
    post_fields: dict[str, Any] = {}
    if data:
        try:
            post_fields = json.loads(data)
        except json.JSONDecodeError as e:
            console.print(f"[red]Error: --data is not valid JSON: {e}[/red]")
            raise typer.Exit(1) from e
        if not isinstance(post_fields, dict):
            console.print("[red]Error: --data must be a JSON object[/red]")
            raise typer.Exit(1)

    query_params = _parse_params(param)
    iterators = {"per_page": per_page, "page": page, "sort_by": sort_by, "sort_order": sort_order}
    sideload = [s.strip() for s in include.split(",")] if include else None
    query_params.update(prepare_query_params(sideload, {k: v for k, v in iterators.items() if v is not None}))

    options = RequestOptions(
        method=method,
        content_type=content_type,
        post_fields=post_fields,
        query_params=query_params,
        file=file,
    )

    try:
        client = ZendeskClient.from_config(subdomain=subdomain)
    except ZendeskError as e:
        raise _fail(e) from e

    with client:
        try:
            result = client.request(endpoint, options)
        except ZendeskError as e:
            raise _fail(e, client, debug) from e

        display_json(result, console)
        if debug:
            display_debug(client.debug, console)


@app.command()
def oauth(
    code: Annotated[str, typer.Argument(help="Authorization code from the redirect")],
    client_id: Annotated[str | None, typer.Option("--client-id", help="OAuth client identifier")] = None,
    client_secret: Annotated[str | None, typer.Option("--client-secret", help="OAuth client secret")] = None,
    redirect_uri: Annotated[str | None, typer.Option("--redirect-uri", help="Redirect URI registered for the client")] = None,
    subdomain: Annotated[str | None, typer.Option("--subdomain", "-s", help="Account subdomain")] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Show request/response headers")] = False,
) -> None:
    """Exchange an authorization code for an access token."""
    oauth_settings = load_oauth_settings()
    client_id = client_id or oauth_settings.client_id
    client_secret = client_secret or oauth_settings.client_secret
    redirect_uri = redirect_uri or oauth_settings.redirect_uri

    missing = [
        name
        for name, value in (("--client-id", client_id), ("--client-secret", client_secret), ("--redirect-uri", redirect_uri))
        if not value
    ]
    if missing:
        console.print(f"[red]Error: Missing {', '.join(missing)}[/red]")
        raise typer.Exit(1)

    try:
        client = ZendeskClient.from_config(subdomain=subdomain)
    except ZendeskError as e:
        raise _fail(e) from e

    with client:
        try:
            token = OAuthExchanger().exchange(client, code, client_id, client_secret, redirect_uri)  # type: ignore[arg-type]
        except ZendeskError as e:
            raise _fail(e, client, debug) from e

        if debug:
            display_debug(client.debug, console)
        if client.debug.error is not None:
            console.print(f"[red]Error: token exchange failed ({client.debug.status_code})[/red]")
            display_json(client.debug.error, console)
            raise typer.Exit(1)
        display_json(token, console)


@app.command()
def config(
    show: Annotated[bool, typer.Option("--show", help="Show current config")] = False,
    set_subdomain: Annotated[str | None, typer.Option("--set-subdomain", help="Set account subdomain")] = None,
    set_username: Annotated[str | None, typer.Option("--set-username", help="Set agent email for API token auth")] = None,
    set_token: Annotated[str | None, typer.Option("--set-token", help="Set API token")] = None,
    set_oauth_token: Annotated[str | None, typer.Option("--set-oauth-token", help="Set OAuth access token")] = None,
) -> None:
    """Manage configuration."""
    updates = {
        "subdomain": set_subdomain,
        "username": set_username,
        "token": set_token,
        "oauth_token": set_oauth_token,
    }
    updates = {k: v for k, v in updates.items() if v is not None}

    if updates:
        cfg = load_config()
        if "zendesk" not in cfg:
            cfg["zendesk"] = {}
        cfg["zendesk"].update(updates)
        save_config(cfg)
        console.print(f"[green]Saved {', '.join(sorted(updates))} to {zd_config.CONFIG_FILE}[/green]")
        if not show:
            return

    creds = load_credentials()
    console.print(f"[bold]Config file:[/bold] {zd_config.CONFIG_FILE}")
    console.print(f"[bold]Config exists:[/bold] {zd_config.CONFIG_FILE.exists()}")
    console.print(f"[bold]Subdomain:[/bold] {creds.subdomain or '[yellow]Not set[/yellow]'}")
    console.print(f"[bold]Host:[/bold] {creds.scheme}://{creds.subdomain or '<subdomain>'}.{creds.hostname}")
    console.print(f"[bold]Username:[/bold] {creds.username or '[yellow]Not set[/yellow]'}")
    for label, secret in (("API token", creds.token), ("OAuth token", creds.oauth_token)):
        if secret:
            console.print(f"[bold]{label}:[/bold] {mask_secret(secret)}")
        else:
            console.print(f"[bold]{label}:[/bold] [yellow]Not set[/yellow]")

    console.print()
    console.print("[dim]Set values with: zd config --set-subdomain acme --set-username you@acme.com --set-token TOKEN[/dim]")


def main() -> int:
    """Main entry point."""
    app()
    return 0


if __name__ == "__main__":
    sys.exit(main())
