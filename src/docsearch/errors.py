"""Error types shared across the search engine.

Every failure that crosses a module boundary is a ``DocSearchError`` carrying
a machine-readable ``ErrorCode`` and a ``recoverable`` flag, so front ends can
decide whether retrying (e.g. reloading the page) makes sense.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INDEX_FETCH_FAILED = "INDEX_FETCH_FAILED"
    INDEX_DECODE_FAILED = "INDEX_DECODE_FAILED"
    EMPTY_ALIAS_SET = "EMPTY_ALIAS_SET"
    SCHEMA_INVALID = "SCHEMA_INVALID"


class DocSearchError(Exception):
    def __init__(self, code: ErrorCode, message: str, *, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.value!r}, message={self.message!r})"


class IndexFetchError(DocSearchError):
    """The search index could not be fetched or decoded."""


class EmptyAliasSetError(DocSearchError):
    """An index entry has no aliases, so it has no minimum distance."""

    def __init__(self, name: str) -> None:
        super().__init__(ErrorCode.EMPTY_ALIAS_SET, f"Entry {name!r} has no aliases")
        self.name = name


class SchemaError(DocSearchError):
    """A GraphQL introspection document is not shaped as expected."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.SCHEMA_INVALID, message)
