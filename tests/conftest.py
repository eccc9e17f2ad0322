"""Shared fixtures: a small index shaped like a generated GraphQL site."""

from __future__ import annotations

import pytest
import structlog

from docsearch.models.index import IndexEntry


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo configure_logging() calls made by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture()
def sample_entries() -> list[IndexEntry]:
    return [
        IndexEntry(aliases=["accounttype"], name="AccountType", kind="enum"),
        IndexEntry(
            aliases=["super_admin", "superadmin"],
            name="SUPER_ADMIN",
            kind="enum_value",
            parent_name="AccountType",
            parent_kind="enum",
        ),
        IndexEntry(aliases=["user"], name="User", kind="object"),
        IndexEntry(
            aliases=["email"],
            name="email",
            kind="field",
            parent_name="User",
            parent_kind="object",
        ),
        IndexEntry(
            aliases=["name"],
            name="name",
            kind="field",
            parent_name="User",
            parent_kind="object",
        ),
        IndexEntry(aliases=["string"], name="String", kind="scalar"),
    ]


@pytest.fixture()
def sample_wire(sample_entries: list[IndexEntry]) -> list[list]:
    return [entry.to_wire() for entry in sample_entries]
