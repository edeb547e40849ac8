"""Review command: sample the newest mods and report approval times."""

from __future__ import annotations

from review_time.analysis.sampler import average_delay, collect
from review_time.client.errors import (
    AnalysisFailed,
    ConfigurationError,
    ReviewTimeError,
    error_handler,
)
from review_time.commands._common import (
    ApiBaseOpt,
    FormatOpt,
    QueryOpt,
    SampleOpt,
    ThemeOpt,
    make_client,
)
from review_time.config.constants import API_BASE
from review_time.config.manager import ConfigManager
from review_time.config.models import OUTPUT_FORMATS
from review_time.output.report import loading_status, render_report, show_status


@error_handler
def review(
    sample: SampleOpt = None,
    query: QueryOpt = None,
    fmt: FormatOpt = None,
    theme: ThemeOpt = None,
    api_base: ApiBaseOpt = API_BASE,
) -> None:
    """Show the average review time of the newest mods on Modrinth."""
    mgr = ConfigManager()
    request = mgr.resolve_sample(sample=sample, query=query)
    fmt = fmt or mgr.config.default_format
    if fmt not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"Unknown format '{fmt}'. Choose one of: {', '.join(OUTPUT_FORMATS)}."
        )
    theme = theme or mgr.config.theme

    if fmt == "table":
        show_status(loading_status(request.size), theme)
    try:
        with make_client(api_base) as client:
            projects = collect(client, request.size)
        render_report(
            projects,
            average_delay(projects),
            sample_size=request.size,
            fmt=fmt,
            theme=theme,
        )
    except ReviewTimeError:
        raise
    except Exception as exc:
        raise AnalysisFailed(f"{type(exc).__name__}: {exc}") from exc
