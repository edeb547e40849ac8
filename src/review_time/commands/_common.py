"""Shared helpers for CLI commands: client factory and option aliases."""

from __future__ import annotations

from typing import Annotated

import typer

from review_time.client.modrinth import ModrinthClient
from review_time.config.constants import API_BASE
from review_time.output.theme import Theme

# Shared Typer option type aliases
SampleOpt = Annotated[
    str | None,
    typer.Option(
        "--sample", "-n",
        help="Number of newest mods to analyse (1-500, otherwise 50)",
    ),
]
QueryOpt = Annotated[
    str | None,
    typer.Option(
        "--query", "-q",
        help="Page query string or URL to read 'sample' from, e.g. '?sample=120'",
    ),
]
FormatOpt = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Output format: table, json, yaml or csv"),
]
ThemeOpt = Annotated[
    Theme | None,
    typer.Option("--theme", "-t", help="Colour theme for table output"),
]
ApiBaseOpt = Annotated[
    str,
    typer.Option("--api-base", hidden=True, help="Modrinth API base URL"),
]


def make_client(api_base: str = API_BASE) -> ModrinthClient:
    """Create a ModrinthClient for *api_base*, ensuring the trailing slash."""
    if not api_base.endswith("/"):
        api_base += "/"
    return ModrinthClient(api_base)
