"""CLI command to preview how a capture groups into endpoints."""

from __future__ import annotations

import sys

import click
from rich.markup import escape
from rich.table import Table

from harsdk.helpers.console import console, truncate


@click.command()
@click.argument("har_path", type=click.Path(exists=True, dir_okay=False))
def inspect(har_path: str) -> None:
    """List the endpoint groups a HAR capture produces."""
    from harsdk.commands.generate.loader import HarValidationError, load_har
    from harsdk.commands.generate.steps.group_endpoints import group_entries

    try:
        har = load_har(har_path)
    except (HarValidationError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    entries = har.log.entries
    groups = group_entries(entries)
    kept = sum(len(g.entries) for g in groups.values())

    console.print("[bold]HAR Summary[/bold]")
    console.print(f"  Entries: {len(entries)} ({len(entries) - kept} without absolute URL)")
    console.print(f"  Endpoints: {len(groups)}")
    console.print()

    if not groups:
        console.print("[yellow]No endpoints found.[/yellow]")
        return

    table = Table(title="Endpoints")
    table.add_column("Key", style="cyan")
    table.add_column("Entries", justify="right")
    table.add_column("First URL")
    for key, group in groups.items():
        table.add_row(
            escape(key),
            str(len(group.entries)),
            escape(truncate(group.entries[0].request.url, 60)),
        )
    console.print(table)
