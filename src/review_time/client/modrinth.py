"""Modrinth API HTTP client."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from review_time import __version__
from review_time.client.errors import MalformedResponse, RequestFailed
from review_time.config.constants import API_BASE, APP_NAME

log = logging.getLogger(__name__)


class ModrinthClient:
    """Synchronous JSON client for the public Modrinth v2 API."""

    def __init__(self, base_url: str = API_BASE) -> None:
        self.base_url = base_url
        transport = httpx.HTTPTransport(retries=0)
        self._client = httpx.Client(
            base_url=base_url,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": f"{APP_NAME}/{__version__}",
            },
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ModrinthClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        if response.is_success:
            return response
        raise RequestFailed(
            response.reason_phrase or str(response.status_code),
            status_code=response.status_code,
        )

    def call(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET *path* relative to the API base and return the decoded JSON body."""
        try:
            response = self._client.get(path, params=params)
        except httpx.ConnectError as exc:
            raise RequestFailed(f"cannot connect to {self.base_url}: {exc}") from exc
        except httpx.TimeoutException as exc:
            raise RequestFailed(f"request to {self.base_url}{path} timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise RequestFailed(f"request to {self.base_url}{path} failed: {exc}") from exc
        log.debug("GET %s -> %s", response.url, response.status_code)
        self._handle_response(response)
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedResponse(f"Response from {path} is not valid JSON: {exc}") from exc
