"""Config commands: sample size, output format and theme preferences."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from review_time.client.errors import error_handler
from review_time.config.manager import ConfigManager
from review_time.output.formatter import output
from review_time.output.theme import TOGGLE_GLYPHS, Theme, next_theme

app = typer.Typer(name="config", help="Manage stored preferences.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


@app.command()
@error_handler
def show(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show the effective configuration."""
    mgr = _get_manager()
    data = mgr.config.model_dump(mode="json")
    output(
        data,
        fmt,
        columns=["Key", "Value"],
        rows=[[k, v] for k, v in data.items()],
        title="Configuration",
    )


@app.command()
def path() -> None:
    """Print the config file location."""
    console.print(str(_get_manager().config_path), markup=False, highlight=False, soft_wrap=True)


@app.command("set-sample")
@error_handler
def set_sample(
    size: Annotated[int, typer.Argument(help="Default sample size (1-500)")],
) -> None:
    """Store the default number of newest mods to analyse."""
    _get_manager().set_sample(size)
    console.print(f"[green]Default sample size set to {size}.[/]")


@app.command("set-format")
@error_handler
def set_format(
    fmt: Annotated[str, typer.Argument(help="table, json, yaml or csv")],
) -> None:
    """Store the default output format."""
    _get_manager().set_format(fmt)
    console.print(f"[green]Default format set to {fmt}.[/]")


@app.command("set-theme")
@error_handler
def set_theme(
    theme: Annotated[Theme, typer.Argument(help="light or dark")],
) -> None:
    """Store the colour theme."""
    _get_manager().set_theme(theme)
    console.print(f"[green]Theme set to {theme.value}.[/] {TOGGLE_GLYPHS[theme]}")


@app.command("toggle-theme")
@error_handler
def toggle_theme() -> None:
    """Switch between the light and dark theme."""
    mgr = _get_manager()
    theme = next_theme(mgr.config.theme)
    mgr.set_theme(theme)
    console.print(f"[green]Theme set to {theme.value}.[/] {TOGGLE_GLYPHS[theme]}")
