"""txresults verify — check the local table against a protocol enumeration."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from txresults.config import load_config
from txresults.errors import ConfigLoadError, EnumerationLoadError
from txresults.sources import FileSource, bundled_snapshot
from txresults.verifier import verify

console = Console()
err_console = Console(stderr=True)


def verify_command(
    enumeration: str = typer.Option(
        "",
        "--enumeration",
        "-e",
        help="YAML/JSON enumeration snapshot. Defaults to config, then the bundled snapshot.",
    ),
    config: str = typer.Option("", "--config", help="Optional config file path"),
    first: bool = typer.Option(False, "--first", help="Stop at the first drift."),
) -> None:
    """Verify every upstream result code is present with the same name."""
    try:
        cfg = load_config(config or None)
        path = enumeration.strip() or cfg.verifier.enumeration.strip()
        source = FileSource.load(path) if path else bundled_snapshot()
    except (ConfigLoadError, EnumerationLoadError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(2) from exc

    report = verify(source, report_all=cfg.verifier.report_all and not first)
    if not report.in_sync:
        err_console.print(f"[red]FAIL[/red] {escape(report.describe())}", highlight=False, soft_wrap=True)
        raise typer.Exit(1)
    console.print(f"[green]OK[/green] {escape(report.describe())}", highlight=False, soft_wrap=True)
