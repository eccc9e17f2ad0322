from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from docsearch.errors import ErrorCode, IndexFetchError

# Record positions in search-index.json
ALIASES = 0
NAME = 1
KIND = 2
PARENT_NAME = 3
PARENT_KIND = 4


class IndexEntry(BaseModel):
    """One documented symbol in the search index."""

    model_config = ConfigDict(frozen=True)

    aliases: list[str]
    name: str
    kind: str  # "object", "field", "enum_value", ...
    parent_name: str | None = None
    parent_kind: str | None = None

    @model_validator(mode="after")
    def validate_parent(self) -> IndexEntry:
        if (self.parent_name is None) != (self.parent_kind is None):
            raise ValueError("parent_name and parent_kind must be given together")
        return self

    @property
    def is_member(self) -> bool:
        return self.parent_name is not None

    @classmethod
    def from_wire(cls, record: Any) -> IndexEntry:
        """Decode a ``[aliases, name, kind, parentName?, parentKind?]`` record."""
        if not isinstance(record, list) or len(record) not in (3, 5):
            raise ValueError(f"expected a 3 or 5 element array, got {record!r}")
        return cls(
            aliases=record[ALIASES],
            name=record[NAME],
            kind=record[KIND],
            parent_name=record[PARENT_NAME] if len(record) == 5 else None,
            parent_kind=record[PARENT_KIND] if len(record) == 5 else None,
        )

    def to_wire(self) -> list[Any]:
        record: list[Any] = [list(self.aliases), self.name, self.kind]
        if self.parent_name is not None and self.parent_kind is not None:
            record += [self.parent_name, self.parent_kind]
        return record


@dataclass(frozen=True, slots=True)
class ScoredEntry:
    """An entry paired with its best alias distance for one query."""

    distance: int | float  # math.inf when the entry cannot match
    entry: IndexEntry

    @property
    def matched(self) -> bool:
        return self.distance != math.inf

    def sort_key(self) -> tuple[int | float, str]:
        return (self.distance, self.entry.name)


def decode_index(payload: Any) -> list[IndexEntry]:
    """Decode the parsed search-index.json array into entries."""
    if not isinstance(payload, list):
        raise IndexFetchError(
            ErrorCode.INDEX_DECODE_FAILED,
            f"Search index must be a JSON array, got {type(payload).__name__}",
        )
    entries: list[IndexEntry] = []
    for position, record in enumerate(payload):
        try:
            entries.append(IndexEntry.from_wire(record))
        except (ValidationError, ValueError) as exc:
            raise IndexFetchError(
                ErrorCode.INDEX_DECODE_FAILED,
                f"Malformed search index record at position {position}: {exc}",
            ) from exc
    return entries


def encode_index(entries: list[IndexEntry]) -> list[list[Any]]:
    return [entry.to_wire() for entry in entries]
