"""Shared console and utilities for CLI commands."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def warn(message: str) -> None:
    """Print a recoverable-problem warning (markup in *message* is escaped)."""
    console.print(f"  [yellow]{escape(message)}[/yellow]")


def truncate(s: str, max_len: int) -> str:
    """Truncate a string to max_len, adding '...' if needed."""
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."
