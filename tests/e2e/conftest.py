"""E2E test configuration: opt-in flag for the live Modrinth API."""

from __future__ import annotations

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--live-api", action="store_true", default=False,
        help="Run tests against the real Modrinth API",
    )


@pytest.fixture(autouse=True)
def live_api(request):
    if not request.config.getoption("--live-api", default=False):
        pytest.skip("Live API tests not requested")
