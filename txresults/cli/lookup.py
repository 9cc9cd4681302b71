"""txresults lookup / list — read the result code table."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from txresults.config import load_config
from txresults.errors import ConfigLoadError, UnknownResultCodeError
from txresults.table import TRANSACTION_RESULTS

console = Console()
err_console = Console(stderr=True)


def lookup_command(
    code: int = typer.Argument(..., help="Numeric result code."),
    strict: bool = typer.Option(False, "--strict", help="Exit 1 for unknown codes instead of printing the sentinel."),
    config: str = typer.Option("", "--config", help="Optional config file path"),
) -> None:
    """Print the canonical name for a result code."""
    try:
        cfg = load_config(config or None)
    except ConfigLoadError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(2) from exc

    if not strict:
        typer.echo(TRANSACTION_RESULTS.get(code, cfg.lookup.unknown_name))
        return
    try:
        name = TRANSACTION_RESULTS.lookup(code)
    except UnknownResultCodeError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(1) from exc
    typer.echo(name)


def list_command() -> None:
    """List every known result code in ascending order."""
    for code, name in TRANSACTION_RESULTS.items():
        typer.echo(f"{code}\t{name}")
