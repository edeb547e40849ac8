"""Sample the newest mods and measure how long they waited for approval."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

from pydantic import TypeAdapter, ValidationError

from review_time.client.errors import MalformedResponse
from review_time.client.modrinth import ModrinthClient
from review_time.config.constants import MOD_FACET, PLACEHOLDER_ICON
from review_time.models.project import EnrichedProject, ProjectRecord, SearchResponse

log = logging.getLogger(__name__)

_ONE_MS = timedelta(milliseconds=1)
_records = TypeAdapter(list[ProjectRecord])


def _compact(value: object) -> str:
    return json.dumps(value, separators=(",", ":"))


def _whole_ms(value: datetime) -> datetime:
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def collect(client: ModrinthClient, sample_size: int) -> list[EnrichedProject]:
    """Fetch the *sample_size* newest mods, most recently approved first.

    Two calls are made in sequence: the listing (``search``) for ids and
    icons, then one batch lookup (``projects``) for the timestamps. Any
    failure aborts the whole pass.
    """
    raw = client.call(
        "search",
        params={
            "index": "newest",
            "limit": sample_size,
            "facets": _compact([[MOD_FACET]]),
        },
    )
    try:
        search = SearchResponse.model_validate(raw)
    except ValidationError as exc:
        raise MalformedResponse(f"Unexpected listing response: {exc}") from exc

    ids = [hit.project_id for hit in search.hits]
    # last write wins on duplicate ids
    icons = {hit.project_id: hit.icon_url for hit in search.hits}
    log.debug("listing returned %d projects", len(ids))

    raw = client.call("projects", params={"ids": _compact(ids)})
    try:
        records = _records.validate_python(raw)
    except ValidationError as exc:
        raise MalformedResponse(f"Unexpected lookup response: {exc}") from exc

    projects = []
    try:
        for r in records:
            approved, queued = _whole_ms(r.approved), _whole_ms(r.queued)
            projects.append(
                EnrichedProject(
                    id=r.id,
                    title=r.title,
                    icon_url=icons.get(r.id) or PLACEHOLDER_ICON,
                    approved=approved,
                    queued=queued,
                    delay=(approved - queued) // _ONE_MS,
                )
            )
        projects.sort(key=lambda p: p.approved, reverse=True)
    except (TypeError, ValueError) as exc:
        # e.g. a naive timestamp next to an aware one
        raise MalformedResponse(f"Inconsistent timestamps in lookup response: {exc}") from exc
    return projects


def average_delay(projects: Sequence[EnrichedProject]) -> float:
    """Mean approval delay in milliseconds, 0 for an empty sample."""
    if not projects:
        return 0
    return sum(p.delay for p in projects) / len(projects)
