"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from review_time.config.constants import ENV_SAMPLE
from review_time.config.manager import ConfigManager
from review_time.models.project import EnrichedProject


@pytest.fixture(autouse=True)
def tmp_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config file at a temp path and clear the env override."""
    path = tmp_path / "config.toml"
    monkeypatch.setattr("review_time.config.manager.CONFIG_FILE", path)
    monkeypatch.delenv(ENV_SAMPLE, raising=False)
    return path


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def search_payload() -> dict:
    """Listing response (matches GET /search), newest first."""
    return {
        "hits": [
            {
                "project_id": "AAAA1111",
                "slug": "sodium-extra",
                "title": "Sodium Extra",
                "project_type": "mod",
                "icon_url": "https://cdn.modrinth.com/data/AAAA1111/icon.png",
            },
            {
                "project_id": "BBBB2222",
                "slug": "tiny-tweaks",
                "title": "Tiny Tweaks",
                "project_type": "mod",
                "icon_url": "https://cdn.modrinth.com/data/BBBB2222/icon.png",
            },
            {
                "project_id": "CCCC3333",
                "slug": "lonely-lamp",
                "title": "Lonely Lamp",
                "project_type": "mod",
                "icon_url": None,
            },
        ],
        "offset": 0,
        "limit": 3,
        "total_hits": 3,
    }


@pytest.fixture
def projects_payload() -> list[dict]:
    """Batch lookup response (matches GET /projects), in server order.

    Delays: CCCC3333 90 s, AAAA1111 3 h 25 min, BBBB2222 1 d 2 h 1 min 30 s.
    """
    return [
        {
            "id": "CCCC3333",
            "slug": "lonely-lamp",
            "title": "Lonely Lamp",
            "queued": "2024-04-30T12:00:00.000000Z",
            "approved": "2024-04-30T12:01:30.000000Z",
        },
        {
            "id": "AAAA1111",
            "slug": "sodium-extra",
            "title": "Sodium Extra",
            "queued": "2024-05-01T10:00:00Z",
            "approved": "2024-05-01T13:25:00Z",
        },
        {
            "id": "BBBB2222",
            "slug": "tiny-tweaks",
            "title": "Tiny Tweaks",
            "queued": "2024-05-02T08:00:00Z",
            "approved": "2024-05-03T10:01:30Z",
        },
    ]


@pytest.fixture
def make_project():
    """Factory for EnrichedProject values with a given delay."""

    def _make(delay: int, project_id: str = "XXXX0000") -> EnrichedProject:
        approved = datetime(2024, 5, 1, 12, 0, 0)
        return EnrichedProject(
            id=project_id,
            title=f"Mod {project_id}",
            icon_url="https://example.com/icon.png",
            approved=approved,
            queued=approved,
            delay=delay,
        )

    return _make
