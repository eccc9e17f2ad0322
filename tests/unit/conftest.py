"""Unit-specific fixtures (no network I/O)."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from docsearch.models.index import IndexEntry
from docsearch.session import DisplayMode


class RecordingView:
    """ResultView that records every call for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []
        self.results: list[IndexEntry] = []
        self.mode = DisplayMode.MAIN
        self.errors: list[Exception] = []

    def set_mode(self, mode: DisplayMode) -> None:
        self.mode = mode
        self.calls.append(("set_mode", mode))

    def clear(self) -> None:
        self.results = []
        self.calls.append(("clear", None))

    def show(self, results: Sequence[IndexEntry]) -> None:
        self.results = list(results)
        self.calls.append(("show", [entry.name for entry in results]))

    def show_error(self, error: Exception) -> None:
        self.errors.append(error)
        self.calls.append(("show_error", error))


@pytest.fixture()
def view() -> RecordingView:
    return RecordingView()
