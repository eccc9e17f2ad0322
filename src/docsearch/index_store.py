"""Single-fetch, cache-forever holder for the search index.

The first ``get()`` starts exactly one load task. Every caller, concurrent
or later, awaits that same task and therefore sees the same entries or the
same ``IndexFetchError``. A failed load is terminal: there is no retry and
no invalidation for the lifetime of the store.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from enum import StrEnum
from typing import TYPE_CHECKING

import structlog

from docsearch.errors import DocSearchError, ErrorCode, IndexFetchError

if TYPE_CHECKING:
    from docsearch.fetcher import IndexFetcher
    from docsearch.models.index import IndexEntry

log = structlog.get_logger()

Loader = Callable[[], Awaitable[Sequence["IndexEntry"]]]


class IndexState(StrEnum):
    UNFETCHED = "unfetched"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class IndexStore:
    def __init__(self, loader: Loader) -> None:
        self._loader = loader
        self._task: asyncio.Task[tuple[IndexEntry, ...]] | None = None

    @classmethod
    def from_source(cls, fetcher: IndexFetcher, source: str) -> IndexStore:
        async def load() -> Sequence[IndexEntry]:
            return await fetcher.fetch(source)

        return cls(load)

    @property
    def state(self) -> IndexState:
        if self._task is None:
            return IndexState.UNFETCHED
        if not self._task.done():
            return IndexState.LOADING
        if self._task.cancelled() or self._task.exception() is not None:
            return IndexState.FAILED
        return IndexState.READY

    async def get(self) -> tuple[IndexEntry, ...]:
        """Return the index, loading it on first use."""
        if self._task is None:
            self._task = asyncio.ensure_future(self._load())
        # A cancelled awaiter must not cancel the load shared with other callers.
        return await asyncio.shield(self._task)

    async def _load(self) -> tuple[IndexEntry, ...]:
        log.debug("index_load_started")
        try:
            entries = tuple(await self._loader())
        except DocSearchError as exc:
            log.warning("index_load_failed", code=exc.code, error=exc.message)
            if isinstance(exc, IndexFetchError):
                raise
            raise IndexFetchError(exc.code, exc.message, recoverable=exc.recoverable) from exc
        except Exception as exc:
            log.warning("index_load_failed", exc_info=True)
            raise IndexFetchError(
                ErrorCode.INDEX_FETCH_FAILED, f"Failed to load search index: {exc}"
            ) from exc
        log.info("index_ready", entries=len(entries))
        return entries
