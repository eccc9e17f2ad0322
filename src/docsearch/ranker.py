from __future__ import annotations

from collections.abc import Sequence

import structlog

from docsearch.distance import EditDistance
from docsearch.models.index import IndexEntry, ScoredEntry
from docsearch.scoring import Metric, score_entry

log = structlog.get_logger()

MAX_RESULTS = 20


class Ranker:
    """Full-scan ranking of an index against a query.

    Every entry is scored on every call; documentation indexes are small
    enough that no trie or BK-tree is kept between queries.
    """

    def __init__(self, metric: Metric | None = None, limit: int = MAX_RESULTS) -> None:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self._metric = metric if metric is not None else EditDistance()
        self.limit = limit

    def score(self, query: str, entries: Sequence[IndexEntry]) -> list[ScoredEntry]:
        """One ScoredEntry per entry, in source order."""
        return [score_entry(query, entry, self._metric) for entry in entries]

    def rank(self, query: str, entries: Sequence[IndexEntry]) -> list[IndexEntry]:
        """Closest entries first; equal distances ordered by name."""
        # Entries without aliases score math.inf and sort after every match.
        scored = self.score(query, entries)
        scored.sort(key=ScoredEntry.sort_key)
        results = [item.entry for item in scored[: self.limit]]
        log.debug("query_ranked", query=query, scanned=len(entries), returned=len(results))
        return results
