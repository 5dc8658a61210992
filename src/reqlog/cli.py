"""CLI entry point."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import IO

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .config import get_settings
from .models import LogEntry
from .stack import pretty_stack

console = Console()


@click.group()
def main() -> None:
    """reqlog: inspect request-scoped log documents."""


@main.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--boundary",
    "boundaries",
    multiple=True,
    help="Directory name marking where frame paths are cut (repeatable).",
)
def stack(source: IO[str], boundaries: tuple[str, ...]) -> None:
    """Prettify a raw stack trace read from SOURCE (stdin by default)."""
    markers = list(boundaries) or get_settings().stack_boundaries
    for line in pretty_stack(source.read(), markers):
        click.echo(line)


@main.command()
@click.argument("source", type=click.File("r"))
def show(source: IO[str]) -> None:
    """Render a dumped log document as one table per area."""
    try:
        document = json.load(source)
        if not isinstance(document, dict):
            raise ValueError("top level must be an object of areas")
        areas = {
            name: [LogEntry.model_validate(entry) for entry in entries]
            for name, entries in document.items()
        }
    except (ValueError, TypeError, ValidationError) as exc:
        raise click.ClickException(f"not a log document: {exc}") from exc

    for name, entries in areas.items():
        table = Table(title=name)
        table.add_column("Time", style="dim")
        table.add_column("Kind", style="cyan")
        table.add_column("Message")
        table.add_column("Payload", overflow="fold")
        for entry in entries:
            stamp = datetime.fromtimestamp(entry.timestamp / 1000, tz=timezone.utc)
            payload = "" if entry.payload is None else json.dumps(entry.payload, default=str)
            table.add_row(
                stamp.isoformat(timespec="milliseconds"),
                entry.kind,
                entry.message,
                payload,
            )
        console.print(table)


@main.command()
def settings() -> None:
    """Print the effective settings."""
    table = Table(title="Settings")
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    for name, value in get_settings().model_dump().items():
        table.add_row(name, str(value))
    console.print(table)


if __name__ == "__main__":
    main()
