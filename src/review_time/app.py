"""Root Typer app: global options and command registration."""

from __future__ import annotations

from typing import Optional

import typer

from review_time import __version__
from review_time.commands import config_cmd, review
from review_time.utils.logging import configure_logging

app = typer.Typer(
    name="review-time",
    help="How long does Modrinth take to approve new mods?",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"review-time {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP calls and diagnostics."),
) -> None:
    """Measure Modrinth's review time from a sample of the newest mods."""
    configure_logging("DEBUG" if verbose else "WARNING")


# Register commands
app.command("review")(review.review)
app.add_typer(config_cmd.app, name="config")


def main() -> None:
    app()
