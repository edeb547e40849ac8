"""Project-related data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from review_time.config.constants import PROJECT_PAGE_BASE


class ProjectSummary(BaseModel):
    """A search hit from the listing endpoint."""

    project_id: str
    icon_url: str | None = None


class SearchResponse(BaseModel):
    """Listing response: ``{"hits": [...], ...}``."""

    hits: list[ProjectSummary]


class ProjectRecord(BaseModel):
    """A full project from the batch lookup endpoint."""

    id: str
    title: str
    approved: datetime
    queued: datetime


class EnrichedProject(BaseModel):
    """A project joined with its icon and approval delay."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    icon_url: str
    approved: datetime
    queued: datetime
    delay: int  # milliseconds, negative when queued is after approved

    @property
    def link(self) -> str:
        return f"{PROJECT_PAGE_BASE}{self.id}"
