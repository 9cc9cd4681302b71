"""CLI tools — txresults verify, txresults lookup, txresults list."""

from importlib import metadata

import typer

from txresults.cli.lookup import list_command, lookup_command
from txresults.cli.verify import verify_command

app = typer.Typer(
    name="txresults",
    help="txresults — transaction result code table and protocol drift check.",
)


def _version_callback(value: bool) -> None:
    """Print installed package version and exit."""
    if not value:
        return
    try:
        version = metadata.version("txresults")
    except metadata.PackageNotFoundError:
        version = "unknown"
    typer.echo(f"txresults {version}")
    raise typer.Exit(0)


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Transaction result code utilities."""


app.command("verify")(verify_command)
app.command("lookup")(lookup_command)
app.command("list")(list_command)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
