"""Pydantic data models for the Modrinth API."""

from review_time.models.project import (
    EnrichedProject,
    ProjectRecord,
    ProjectSummary,
    SearchResponse,
)

__all__ = [
    "EnrichedProject",
    "ProjectRecord",
    "ProjectSummary",
    "SearchResponse",
]
