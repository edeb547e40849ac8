"""Render the review-time report: status lines and the sampled mods."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.markup import escape

from review_time.models.project import EnrichedProject
from review_time.output import formatter
from review_time.output.theme import Theme, rich_theme
from review_time.utils.duration import format_duration

COLUMNS = ["Title", "Approved in", "Link", "Icon"]
_STYLES = ["text", "data", "subtext", "subtext"]


def loading_status(sample_size: int) -> str:
    return f"Analyzing the {sample_size} newest mods..."


def average_status(average_ms: float) -> str:
    """Status line with the average emphasized (Rich markup)."""
    return f"Average review time: [data]{format_duration(average_ms)}[/data]."


def display_record(project: EnrichedProject) -> dict[str, Any]:
    """Everything a renderer needs for one mod card."""
    return {
        "id": project.id,
        "title": project.title,
        "link": project.link,
        "icon_url": project.icon_url,
        "approved": project.approved.isoformat(),
        "delay_ms": project.delay,
        "approved_in": format_duration(project.delay),
    }


def show_status(message: str, theme: Theme) -> None:
    with formatter.console.use_theme(rich_theme(theme)):
        formatter.console.print(message, style="text")


def render_report(
    projects: Sequence[EnrichedProject],
    average_ms: float,
    *,
    sample_size: int,
    fmt: str = "table",
    theme: Theme = Theme.DARK,
) -> None:
    """Print the report in *fmt*.

    Tables get the themed status line above them; the machine formats
    carry the average inside the payload instead.
    """
    records = [display_record(p) for p in projects]
    rows = [[r["title"], r["approved_in"], r["link"], r["icon_url"]] for r in records]
    if fmt == "table":
        with formatter.console.use_theme(rich_theme(theme)):
            formatter.console.print(average_status(average_ms), style="text")
            formatter.output(
                records, fmt, columns=COLUMNS, styles=_STYLES,
                style="background", row_styles=["", "panel"],
                rows=[[escape(cell) for cell in row] for row in rows],
                title=f"{len(records)} newest mods",
            )
        return
    data = {
        "sample_size": sample_size,
        "average_delay_ms": average_ms,
        "average_review_time": format_duration(average_ms),
        "projects": records,
    }
    formatter.output(data, fmt, columns=COLUMNS, rows=rows)
