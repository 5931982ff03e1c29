"""CLI entry point for har-sdk."""

from __future__ import annotations

import click
from dotenv import load_dotenv

from harsdk.commands.generate.cmd import generate
from harsdk.commands.inspect.cmd import inspect

load_dotenv()


@click.group()
@click.version_option(version="0.1.0", prog_name="har-sdk")
def cli() -> None:
    """Generate typed TypeScript SDKs from captured HTTP traffic."""


cli.add_command(generate)
cli.add_command(inspect)


if __name__ == "__main__":
    cli()
