"""Live search state machine.

``SearchSession.on_input`` is called with the raw text of the search box on
every change. Blank input shows the main page; anything else ranks the index
and replaces the rendered results.

Each input takes a new generation number. The index await is the only
suspension point, so when it completes the session checks that no newer
input arrived in the meantime; stale searches are dropped instead of
overwriting newer results.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

import structlog

from docsearch.errors import IndexFetchError

if TYPE_CHECKING:
    from docsearch.index_store import IndexStore
    from docsearch.models.index import IndexEntry
    from docsearch.ranker import Ranker

log = structlog.get_logger()


class DisplayMode(StrEnum):
    MAIN = "main"
    SEARCH = "search"


class ResultView(Protocol):
    def set_mode(self, mode: DisplayMode) -> None: ...

    def clear(self) -> None: ...

    def show(self, results: Sequence[IndexEntry]) -> None: ...

    def show_error(self, error: IndexFetchError) -> None: ...


class SearchSession:
    def __init__(self, store: IndexStore, ranker: Ranker, view: ResultView) -> None:
        self._store = store
        self._ranker = ranker
        self._view = view
        self._generation = 0
        self.mode = DisplayMode.MAIN

    @property
    def generation(self) -> int:
        return self._generation

    async def on_input(self, raw: str) -> list[IndexEntry] | None:
        """Handle one input change.

        Returns the rendered results, or ``None`` when nothing was rendered
        (blank input, or a newer input superseded this one). Raises
        ``IndexFetchError`` if the index cannot be loaded.
        """
        self._generation += 1
        generation = self._generation
        query = raw.strip()

        if not query:
            self._enter(DisplayMode.MAIN)
            self._view.clear()
            return None

        self._enter(DisplayMode.SEARCH)
        try:
            entries = await self._store.get()
        except IndexFetchError as exc:
            if generation == self._generation:
                self._view.show_error(exc)
            raise

        if generation != self._generation:
            log.debug("stale_search_dropped", query=query, generation=generation)
            return None

        results = self._ranker.rank(query, entries)
        self._view.clear()
        self._view.show(results)
        return results

    def _enter(self, mode: DisplayMode) -> None:
        if mode is not self.mode:
            log.debug("display_mode_changed", old=self.mode, new=mode)
            self.mode = mode
            self._view.set_mode(mode)
