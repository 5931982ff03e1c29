"""CLI command for the generate stage."""

from __future__ import annotations

import sys

import click
from click.core import ParameterSource
from rich.markup import escape
import yaml

from harsdk.helpers.console import console


@click.command()
@click.argument("har_path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", required=True, help="Output TypeScript file (.ts)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with generator options",
)
@click.option(
    "--merge-types/--no-merge-types",
    default=True,
    envvar="HAR_SDK_MERGE_TYPES",
    help="Collapse structurally identical types into one definition",
)
@click.option(
    "--type-prefix",
    default="",
    envvar="HAR_SDK_TYPE_PREFIX",
    help="Prefix prepended to every generated type name",
)
@click.option(
    "--skip-validation",
    is_flag=True,
    default=False,
    envvar="HAR_SDK_SKIP_VALIDATION",
    help="Do not check the HAR top-level structure before generating",
)
def generate(
    har_path: str,
    output: str,
    config_path: str | None,
    merge_types: bool,
    type_prefix: str,
    skip_validation: bool,
) -> None:
    """Generate a TypeScript SDK from a HAR capture."""
    from harsdk.commands.generate.loader import HarValidationError, load_har
    from harsdk.commands.generate.pipeline import generate_sdk
    from harsdk.commands.generate.typescript import write_typescript_sdk
    from harsdk.config import load_options

    # Flags given on the command line or in the environment beat the config file.
    ctx = click.get_current_context()
    flags = {
        "merge_types": merge_types,
        "type_prefix": type_prefix,
        "skip_validation": skip_validation,
    }
    overrides = {
        name: value
        for name, value in flags.items()
        if ctx.get_parameter_source(name) is not ParameterSource.DEFAULT
    }

    try:
        options = load_options(config_path, **overrides)
    except (ValueError, OSError, yaml.YAMLError) as e:
        console.print(f"[red]Error: invalid options: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"[bold]Reading HAR file:[/bold] {escape(har_path)}")
    try:
        har = load_har(har_path, validate=not options.skip_validation)
    except (HarValidationError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    console.print(f"  Loaded {len(har.log.entries)} entries")

    def on_progress(msg: str) -> None:
        console.print(f"  {msg}")

    result = generate_sdk(har, options, on_progress=on_progress)

    console.print("[bold]Writing TypeScript SDK...[/bold]")
    try:
        write_typescript_sdk(result, output)
    except OSError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    console.print(f"[green]Generated SDK {escape(output)}[/green]")
