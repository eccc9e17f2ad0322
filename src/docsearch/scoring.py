from __future__ import annotations

import math
from collections.abc import Callable

import structlog

from docsearch.errors import EmptyAliasSetError
from docsearch.models.index import IndexEntry, ScoredEntry

log = structlog.get_logger()

Metric = Callable[[str, str], int]


def best_alias_distance(query: str, entry: IndexEntry, metric: Metric) -> int:
    """Minimum distance from ``query`` to any of the entry's aliases.

    Raises ``EmptyAliasSetError`` when the entry has no aliases to compare.
    """
    if not entry.aliases:
        raise EmptyAliasSetError(entry.name)
    best = metric(query, entry.aliases[0])
    for alias in entry.aliases[1:]:
        if best == 0:
            break
        best = min(best, metric(query, alias))
    return best


def score_entry(query: str, entry: IndexEntry, metric: Metric) -> ScoredEntry:
    """Score one entry; an entry without aliases never matches."""
    try:
        distance: int | float = best_alias_distance(query, entry, metric)
    except EmptyAliasSetError:
        log.warning("entry_without_aliases", name=entry.name, kind=entry.kind)
        distance = math.inf
    return ScoredEntry(distance=distance, entry=entry)
