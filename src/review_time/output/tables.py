"""Rich table rendering helpers."""

from __future__ import annotations

from typing import Any, Sequence

from rich.table import Table


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    styles: Sequence[str | None] | None = None,
    style: str = "none",
    row_styles: Sequence[str] | None = None,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data.

    *styles* holds one style name per column; ``None`` keeps the default.
    *style* and *row_styles* set the table background and row stripes.
    """
    table = Table(title=title, show_lines=show_lines, style=style, row_styles=row_styles)
    styles = styles or [None] * len(columns)
    for col, col_style in zip(columns, styles):
        table.add_column(col, style=col_style, no_wrap=False)
    for row in rows:
        table.add_row(*(str(cell) if cell is not None else "" for cell in row))
    return table
