"""Rich display functions for the zd CLI."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from zendesk.client.debug import DebugSnapshot

MIN_KEY_LENGTH_FOR_MASKING = 8


def mask_secret(value: str) -> str:
    """Show only the ends of a credential."""
    if len(value) > MIN_KEY_LENGTH_FOR_MASKING:
        return value[:4] + "..." + value[-4:]
    return "***"


def display_json(data: Any, console: Console) -> None:
    """Pretty-print a decoded response body."""
    if data is None:
        console.print("[dim](empty response)[/dim]")
        return
    console.print_json(json.dumps(data, default=str))


def display_debug(snapshot: DebugSnapshot, console: Console) -> None:
    """Display the last-request debug snapshot as tables."""
    status = "-" if snapshot.status_code is None else str(snapshot.status_code)
    status_style = "red" if snapshot.status_code and snapshot.status_code >= 400 else "green"  # noqa: PLR2004

    table = Table(title="Last Request", show_header=True, header_style="bold magenta", expand=True)
    table.add_column("Header", style="cyan", no_wrap=True)
    table.add_column("Value", style="green", overflow="fold")

    table.add_row("[bold]Status[/bold]", f"[{status_style}]{status}[/{status_style}]")
    table.add_section()
    for name, value in snapshot.request_headers.items():
        table.add_row(f"> {name}", value)
    table.add_section()
    for name, value in snapshot.response_headers.items():
        table.add_row(f"< {name}", value)

    console.print()
    console.print(table)

    if snapshot.error is not None:
        console.print("[bold red]API error:[/bold red]")
        display_json(snapshot.error, console)
