"""Project data sources: local JSON files and HTTP(S) URLs."""

from __future__ import annotations

import asyncio
import json
import logging
import re
from pathlib import Path
from typing import Any

import httpx

from projdash.data.protocols import ProjectSource
from projdash.exceptions import DataSourceError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_HEADERS = {"Accept": "application/json"}

_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


class JsonFileSource:
    """Read the project list from a JSON file on disk."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    async def fetch(self) -> list[dict[str, Any]]:
        try:
            text = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        except OSError as exc:
            raise DataSourceError("Could not read project file", details=str(self._path)) from exc
        return decode_projects(text, origin=str(self._path))


class HttpJsonSource:
    """Fetch the project list from an HTTP(S) endpoint."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def fetch(self) -> list[dict[str, Any]]:
        async with httpx.AsyncClient(
            timeout=self._timeout,
            headers=DEFAULT_HEADERS,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(self._url)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise DataSourceError(
                    f"HTTP error {exc.response.status_code}",
                    details=f"URL: {self._url}",
                ) from exc
            except httpx.RequestError as exc:
                raise DataSourceError(f"Request failed: {exc}", details=f"URL: {self._url}") from exc
        return decode_projects(response.text, origin=self._url)


def source_for(location: str, *, timeout: float = DEFAULT_TIMEOUT) -> ProjectSource:
    """Pick a source implementation for a path or URL."""
    if _URL_PATTERN.match(location.strip()):
        return HttpJsonSource(location.strip(), timeout=timeout)
    return JsonFileSource(Path(location).expanduser())


def decode_projects(text: str, *, origin: str = "") -> list[dict[str, Any]]:
    """Decode a JSON payload into a list of raw project entries.

    The payload is either a top-level array or an object with a
    ``projects`` array. Non-object entries are skipped.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataSourceError(f"Invalid JSON: {exc.msg}", details=origin or None) from exc

    if isinstance(payload, dict):
        payload = payload.get("projects")
    if not isinstance(payload, list):
        raise DataSourceError("Expected a list of projects", details=origin or None)

    entries: list[dict[str, Any]] = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            logger.warning("Skipping non-object project entry at index %d", position)
            continue
        entries.append(item)
    return entries
