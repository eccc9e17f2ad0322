"""Unit tests for docsearch.session."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest

from docsearch.errors import ErrorCode, IndexFetchError
from docsearch.index_store import IndexStore
from docsearch.ranker import Ranker
from docsearch.session import DisplayMode, SearchSession

if TYPE_CHECKING:
    from docsearch.models.index import IndexEntry
    from tests.unit.conftest import RecordingView


@pytest.fixture()
def store(sample_entries: list[IndexEntry]) -> IndexStore:
    return IndexStore(AsyncMock(return_value=sample_entries))


class TestModeTransitions:
    async def test_starts_in_main(self, store: IndexStore, view: RecordingView) -> None:
        session = SearchSession(store, Ranker(), view)
        assert session.mode is DisplayMode.MAIN

    async def test_query_enters_search_and_renders(
        self, store: IndexStore, view: RecordingView
    ) -> None:
        session = SearchSession(store, Ranker(), view)
        results = await session.on_input("  accounttype ")
        assert session.mode is DisplayMode.SEARCH
        assert view.mode is DisplayMode.SEARCH
        assert results is not None
        assert results[0].name == "AccountType"
        assert view.results == results

    async def test_blank_input_returns_to_main(
        self, store: IndexStore, view: RecordingView
    ) -> None:
        session = SearchSession(store, Ranker(), view)
        await session.on_input("user")
        assert await session.on_input("   ") is None
        assert session.mode is DisplayMode.MAIN
        assert view.mode is DisplayMode.MAIN
        assert view.results == []

    async def test_blank_input_never_ranks(self, view: RecordingView) -> None:
        ranker = MagicMock(spec=Ranker)
        loader = AsyncMock(return_value=[])
        session = SearchSession(IndexStore(loader), ranker, view)

        await session.on_input("")
        await session.on_input(" \t\n")

        ranker.rank.assert_not_called()
        loader.assert_not_awaited()
        assert session.mode is DisplayMode.MAIN

    async def test_mode_pushed_only_on_transition(
        self, store: IndexStore, view: RecordingView
    ) -> None:
        session = SearchSession(store, Ranker(), view)
        await session.on_input("u")
        await session.on_input("us")
        await session.on_input("use")
        mode_calls = [arg for name, arg in view.calls if name == "set_mode"]
        assert mode_calls == [DisplayMode.SEARCH]


class TestRendering:
    async def test_previous_results_cleared_before_show(
        self, store: IndexStore, view: RecordingView
    ) -> None:
        session = SearchSession(store, Ranker(), view)
        await session.on_input("user")
        view.calls.clear()
        await session.on_input("email")
        assert [name for name, _ in view.calls] == ["clear", "show"]
        assert view.results[0].name == "email"

    async def test_passes_trimmed_query_to_ranker(
        self, sample_entries: list[IndexEntry], view: RecordingView
    ) -> None:
        ranker = MagicMock(spec=Ranker)
        ranker.rank.return_value = sample_entries[:1]
        session = SearchSession(IndexStore(AsyncMock(return_value=sample_entries)), ranker, view)
        await session.on_input("  super admin  ")
        ranker.rank.assert_called_once_with("super admin", tuple(sample_entries))

    async def test_ranked_order_preserved(self, store: IndexStore, view: RecordingView) -> None:
        session = SearchSession(store, Ranker(), view)
        results = await session.on_input("name")
        assert results is not None
        assert view.results == results
        assert results[0].name == "name"


class TestStaleResults:
    async def test_superseded_search_is_dropped(
        self, sample_entries: list[IndexEntry], view: RecordingView
    ) -> None:
        gate = asyncio.Event()

        async def load() -> list[IndexEntry]:
            await gate.wait()
            return sample_entries

        session = SearchSession(IndexStore(load), Ranker(), view)

        older = asyncio.ensure_future(session.on_input("user"))
        await asyncio.sleep(0)
        newer = asyncio.ensure_future(session.on_input("email"))
        await asyncio.sleep(0)
        gate.set()

        older_results, newer_results = await asyncio.gather(older, newer)
        assert older_results is None
        assert newer_results is not None
        assert view.results[0].name == "email"
        shows = [arg for name, arg in view.calls if name == "show"]
        assert len(shows) == 1

    async def test_blank_input_supersedes_pending_search(
        self, sample_entries: list[IndexEntry], view: RecordingView
    ) -> None:
        gate = asyncio.Event()

        async def load() -> list[IndexEntry]:
            await gate.wait()
            return sample_entries

        session = SearchSession(IndexStore(load), Ranker(), view)

        pending = asyncio.ensure_future(session.on_input("user"))
        await asyncio.sleep(0)
        await session.on_input("")
        gate.set()

        assert await pending is None
        assert session.mode is DisplayMode.MAIN
        assert view.results == []


class TestFetchFailure:
    async def test_failure_rejects_and_reports(self, view: RecordingView) -> None:
        error = IndexFetchError(ErrorCode.INDEX_FETCH_FAILED, "offline", recoverable=True)
        session = SearchSession(IndexStore(AsyncMock(side_effect=error)), Ranker(), view)

        with pytest.raises(IndexFetchError):
            await session.on_input("user")
        assert view.errors == [error]

        # Terminal: later searches fail the same way without refetching.
        with pytest.raises(IndexFetchError):
            await session.on_input("email")
        assert len(view.errors) == 2

    async def test_in_flight_searches_all_reject(self, view: RecordingView) -> None:
        gate = asyncio.Event()

        async def load() -> list[IndexEntry]:
            await gate.wait()
            raise IndexFetchError(ErrorCode.INDEX_FETCH_FAILED, "offline")

        session = SearchSession(IndexStore(load), Ranker(), view)
        first = asyncio.ensure_future(session.on_input("user"))
        second = asyncio.ensure_future(session.on_input("users"))
        await asyncio.sleep(0)
        gate.set()

        results = await asyncio.gather(first, second, return_exceptions=True)
        assert all(isinstance(result, IndexFetchError) for result in results)
        # Only the latest search reports to the view.
        assert len(view.errors) == 1
