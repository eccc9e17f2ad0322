"""Levenshtein edit distance.

Single-row dynamic programming: the row for ``a`` is rewritten once per
character of ``b``, so memory is O(len(a)) and time O(len(a) * len(b)).
Only insertions, deletions, and substitutions count as edits.
"""

from __future__ import annotations


class EditDistance:
    """Callable edit-distance metric with its own reusable scratch row.

    The row is overwritten by every call. An instance must not be shared
    between threads; give each thread its own ``EditDistance``.
    """

    def __init__(self) -> None:
        self._row: list[int] = []

    def __call__(self, a: str, b: str) -> int:
        if a == b:
            return 0
        a_len, b_len = len(a), len(b)
        if not a_len or not b_len:
            return a_len + b_len

        row = self._row
        if len(row) < a_len:
            row.extend([0] * (a_len - len(row)))
        for i in range(a_len):
            row[i] = i + 1

        current = 0
        for j, b_char in enumerate(b):
            diagonal = j
            current = j + 1
            for i in range(a_len):
                substitute = diagonal + (a[i] != b_char)
                diagonal = row[i]
                current = min(current + 1, diagonal + 1, substitute)
                row[i] = current
        return current


def levenshtein(a: str, b: str) -> int:
    """One-off distance using a fresh scratch row."""
    return EditDistance()(a, b)
