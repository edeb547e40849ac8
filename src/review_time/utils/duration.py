"""Human-readable durations."""

from __future__ import annotations

import math

LESS_THAN_A_MINUTE = "less than a minute"


def _unit(value: int, label: str) -> str:
    return f"{value} {label}" if value == 1 else f"{value} {label}s"


def format_duration(milliseconds: float) -> str:
    """Render *milliseconds* as at most two units, e.g. ``"3 hours and 25 minutes"``.

    Sub-minute precision is dropped. Minutes are only shown when fewer
    than two larger units are.
    """
    seconds = math.floor(milliseconds / 1000)
    if seconds <= 0:
        return LESS_THAN_A_MINUTE
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes = rest // 60

    parts = []
    if days > 0:
        parts.append(_unit(days, "day"))
    if hours > 0:
        parts.append(_unit(hours, "hour"))
    if minutes > 0 and len(parts) < 2:
        parts.append(_unit(minutes, "minute"))
    return " and ".join(parts) or LESS_THAN_A_MINUTE
