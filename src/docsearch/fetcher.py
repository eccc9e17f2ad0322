"""Loading search-index.json over HTTP or from disk.

All failures (connection errors, non-2xx statuses, unreadable files, bad
JSON) are converted to ``IndexFetchError`` here so callers only ever see one
error type from the fetch path.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from docsearch import __version__
from docsearch.errors import ErrorCode, IndexFetchError
from docsearch.models.index import decode_index

if TYPE_CHECKING:
    from docsearch.config import IndexSettings
    from docsearch.models.index import IndexEntry

log = structlog.get_logger()

USER_AGENT = f"docsearch/{__version__}"


def build_http_client(settings: IndexSettings | None = None) -> httpx.AsyncClient:
    timeout = settings.timeout_seconds if settings is not None else 10.0
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    )


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class IndexFetcher:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, source: str) -> list[IndexEntry]:
        """Fetch and decode the index at ``source`` (URL or local path)."""
        if is_remote(source):
            payload = await self._fetch_remote(source)
        else:
            payload = await self._read_local(source)
        entries = decode_index(payload)
        log.info("index_fetched", source=source, entries=len(entries))
        return entries

    async def _fetch_remote(self, url: str) -> Any:
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise IndexFetchError(
                ErrorCode.INDEX_FETCH_FAILED,
                f"Failed to fetch search index from {url}: {exc}",
                recoverable=True,
            ) from exc

        if response.status_code != 200:
            raise IndexFetchError(
                ErrorCode.INDEX_FETCH_FAILED,
                f"Search index request to {url} returned HTTP {response.status_code}",
                recoverable=response.status_code >= 500,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise IndexFetchError(
                ErrorCode.INDEX_DECODE_FAILED,
                f"Search index at {url} is not valid JSON: {exc}",
            ) from exc

    async def _read_local(self, path: str) -> Any:
        try:
            text = await asyncio.to_thread(Path(path).expanduser().read_text, encoding="utf-8")
        except OSError as exc:
            raise IndexFetchError(
                ErrorCode.INDEX_FETCH_FAILED,
                f"Failed to read search index {path}: {exc}",
            ) from exc

        try:
            return json.loads(text)
        except ValueError as exc:
            raise IndexFetchError(
                ErrorCode.INDEX_DECODE_FAILED,
                f"Search index {path} is not valid JSON: {exc}",
            ) from exc
