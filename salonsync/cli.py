"""salonsync CLI - manual sync trigger and status."""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from .config import settings
from .errors import ConfigurationError

app = typer.Typer(
    name="salonsync",
    help="Sync staff, services and bookings from the booking platform",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _output_result(result: dict[str, Any]) -> None:
    console.print_json(json.dumps(result, default=str))


def _parse_branch_id(value: str) -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError:
        raise typer.BadParameter(f"Not a valid branch id: {value}")


async def _sync(branch_id: uuid.UUID):
    from .database import async_session_factory
    from .sync.sync_engine import run_sync

    async with async_session_factory() as db:
        return await run_sync(db, branch_id)


async def _status(branch_id: uuid.UUID) -> dict[str, Any]:
    from .database import async_session_factory
    from .sync.audit import latest_sync_status, summarize_latest

    async with async_session_factory() as db:
        return summarize_latest(await latest_sync_status(db, branch_id))


@app.command("sync")
def sync_command(
    branch_id: str = typer.Argument(..., help="Local branch id (UUID)"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Run a full sync for one branch."""
    bid = _parse_branch_id(branch_id)
    try:
        result = asyncio.run(_sync(bid))
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if json_output:
        _output_result(result.model_dump())
        return

    table = Table(title=f"Sync results for {bid}")
    table.add_column("Entity", style="cyan")
    table.add_column("Status")
    table.add_column("Count", justify="right")
    table.add_column("Error", style="red")
    for name in ("staff", "services", "bookings"):
        detail = getattr(result.details, name)
        status = "[green]success[/green]" if detail.status == "success" else "[red]error[/red]"
        table.add_row(name, status, str(detail.count), detail.error or "-")
    console.print(table)


@app.command("status")
def status_command(
    branch_id: str = typer.Argument(..., help="Local branch id (UUID)"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Show the latest sync outcome per entity class."""
    bid = _parse_branch_id(branch_id)
    latest = asyncio.run(_status(bid))

    if json_output:
        _output_result(latest)
        return

    table = Table(title=f"Last sync for {bid}")
    table.add_column("Entity", style="cyan")
    table.add_column("Status")
    table.add_column("Count", justify="right")
    table.add_column("When", style="dim")
    table.add_column("Error", style="red")
    for name, entry in latest.items():
        if entry is None:
            table.add_row(name, "[yellow]pending[/yellow]", "-", "-", "-")
            continue
        table.add_row(
            name,
            entry["status"],
            str(entry["count"]),
            str(entry["synced_at"]),
            entry["error"] or "-",
        )
    console.print(table)


if __name__ == "__main__":
    app()
