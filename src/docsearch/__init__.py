"""Incremental fuzzy search over a generated documentation index."""

from __future__ import annotations

__version__ = "0.1.0"
