"""Output dispatcher: renders data in table, JSON, YAML, or CSV format."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from rich.console import Console

from review_time.output.tables import make_table

console = Console()


def output_json(data: Any) -> None:
    """Print data as formatted JSON."""
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    console.print_json(json.dumps(data, indent=2, default=str))


def output_yaml(data: Any) -> None:
    """Print data as YAML."""
    import yaml

    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    console.print(
        yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True),
        end="",
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print data as CSV."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(columns)
    writer.writerows(
        [[str(v) if v is not None else "" for v in row] for row in rows]
    )
    console.print(
        buf.getvalue(), end="", markup=False, emoji=False, highlight=False, soft_wrap=True,
    )


def output_table(
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    title: str | None = None,
    styles: Sequence[str | None] | None = None,
    style: str = "none",
    row_styles: Sequence[str] | None = None,
) -> None:
    """Print rows as a Rich table."""
    console.print(
        make_table(title, columns, rows, styles=styles, style=style, row_styles=row_styles)
    )


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    title: str | None = None,
    styles: Sequence[str | None] | None = None,
    style: str = "none",
    row_styles: Sequence[str] | None = None,
) -> None:
    """Dispatch output to the appropriate formatter.

    *data* feeds the json and yaml renderers; *columns* and *rows* feed
    the table and csv renderers.
    """
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif fmt == "csv":
        output_csv(columns, rows)
    else:
        output_table(
            columns, rows, title=title, styles=styles, style=style, row_styles=row_styles,
        )
