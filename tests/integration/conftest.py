"""Fixtures for command tests."""

from __future__ import annotations

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Render tables wide enough that cells never wrap."""
    monkeypatch.setattr("review_time.output.formatter.console", Console(width=250))
